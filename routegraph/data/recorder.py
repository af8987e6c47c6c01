"""
Report recorder: echoes analysis reports and appends them to per-graph logs.

Each graph gets its own log file (log_graph01.txt, log_graph02.txt, ...)
under the logs directory. Every entry starts with a timestamped header.
"""

from __future__ import annotations

import logging
import sys
import threading
from datetime import datetime
from pathlib import Path
from typing import TextIO

from routegraph.config import LOG_FILE_TEMPLATE, LOGS_DIR, REPORT_TIMESTAMP_FORMAT

logger = logging.getLogger(__name__)


class ReportRecorder:
    """
    Writes reports to the console and to the log file of their graph.

    Appends are serialized by a lock shared across all recorders.

    Attributes:
        log_dir: Directory holding the log files (created on first write)
        echo: Whether reports are also written to `stream`
    """

    _lock = threading.Lock()

    def __init__(
        self,
        log_dir: Path | str = LOGS_DIR,
        echo: bool = True,
        stream: TextIO | None = None,
    ) -> None:
        self.log_dir = Path(log_dir)
        self.echo = echo
        self._stream = stream

    def log_path(self, graph_index: int) -> Path:
        return self.log_dir / LOG_FILE_TEMPLATE.format(index=graph_index)

    def record(self, graph_index: int, text: str | None) -> Path:
        """
        Echo a report and append it to the graph's log file.

        Args:
            graph_index: 1-based index of the analysed graph
            text: Report text; None is recorded as "(null)"

        Returns:
            Path of the log file written to
        """
        if text is None:
            text = "(null)"

        if self.echo:
            stream = self._stream or sys.stdout
            stream.write(text if text.endswith("\n") else text + "\n")

        path = self.log_path(graph_index)
        timestamp = datetime.now().strftime(REPORT_TIMESTAMP_FORMAT)

        with self._lock:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            with open(path, "a", encoding="utf-8") as f:
                f.write(f"=== REPORT GENERATED AT {timestamp} ===\n")
                f.write(text)
                if not text.endswith("\n"):
                    f.write("\n")
                f.write("\n")

        logger.debug(f"Recorded {len(text)} characters to {path}")
        return path
