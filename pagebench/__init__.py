"""Benchmark paginated API endpoints against each other."""

__version__ = "0.1.0"
