"""Deterministic clinical rules for nursing shift documentation."""

__version__ = "1.0.0"
