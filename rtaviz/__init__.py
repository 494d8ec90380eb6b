"""Helpers for trace analysis: optional values, formatting and visualisation."""

__version__ = "0.2.0"