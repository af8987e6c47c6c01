"""
Logistics Route Analysis Suite.

Loads weighted, capacitated logistics networks and answers routing
questions on them: cheapest routes, maximum throughput, minimum spanning
trees, conflict-free maintenance rounds, and single-trip inspection tours.
"""

__version__ = "0.1.0"
