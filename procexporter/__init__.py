"""Prometheus exporter for processes matched by command line."""

__version__ = "0.1.0"
