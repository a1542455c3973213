"""Headless turn-based card-combat engine."""

__version__ = "0.1.0"
