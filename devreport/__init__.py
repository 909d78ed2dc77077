"""Aggregate project sources and development diagnostics into one report."""

__version__ = "0.1.0"
