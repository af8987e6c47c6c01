"""
Unit tests for ReportRecorder.
"""

import io
import re
import threading

from routegraph.data import ReportRecorder

HEADER = re.compile(r"^=== REPORT GENERATED AT \d{2}/\d{2}/\d{4} \d{2}:\d{2}:\d{2} ===$")


class TestReportRecorder:
    """Test report echo and log file appends."""

    def test_writes_log_file(self, tmp_path):
        """Reports land in log_graphNN.txt with a timestamped header."""
        recorder = ReportRecorder(tmp_path / "logs", echo=False)
        path = recorder.record(3, "hello\n")

        assert path == tmp_path / "logs" / "log_graph03.txt"
        lines = path.read_text(encoding="utf-8").splitlines()
        assert HEADER.match(lines[0])
        assert lines[1] == "hello"

    def test_appends(self, tmp_path):
        """Successive reports are appended, not overwritten."""
        recorder = ReportRecorder(tmp_path, echo=False)
        recorder.record(1, "first")
        path = recorder.record(1, "second")

        text = path.read_text(encoding="utf-8")
        assert text.count("=== REPORT GENERATED AT") == 2
        assert text.index("first") < text.index("second")

    def test_echo_to_stream(self, tmp_path):
        """Reports are echoed to the given stream."""
        stream = io.StringIO()
        ReportRecorder(tmp_path, stream=stream).record(1, "visible")
        assert stream.getvalue() == "visible\n"

    def test_no_echo(self, tmp_path):
        """echo=False keeps the stream silent."""
        stream = io.StringIO()
        ReportRecorder(tmp_path, echo=False, stream=stream).record(1, "quiet")
        assert stream.getvalue() == ""

    def test_none_recorded_as_null(self, tmp_path):
        """A missing report is written as (null)."""
        path = ReportRecorder(tmp_path, echo=False).record(2, None)
        assert "(null)" in path.read_text(encoding="utf-8")

    def test_separate_files_per_graph(self, tmp_path):
        """Each graph index has its own file."""
        recorder = ReportRecorder(tmp_path, echo=False)
        recorder.record(1, "a")
        recorder.record(2, "b")
        assert sorted(p.name for p in tmp_path.iterdir()) == [
            "log_graph01.txt",
            "log_graph02.txt",
        ]

    def test_concurrent_records_do_not_interleave(self, tmp_path):
        """Whole entries are written under the lock."""
        recorder = ReportRecorder(tmp_path, echo=False)
        body = "x" * 2000

        threads = [
            threading.Thread(target=recorder.record, args=(1, body)) for _ in range(8)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        lines = recorder.log_path(1).read_text(encoding="utf-8").splitlines()
        assert lines.count(body) == 8
        assert sum(1 for line in lines if HEADER.match(line)) == 8
