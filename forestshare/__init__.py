"""Offline player sharing for Forest Shuffle scoring sessions."""

__version__ = "0.3.0"
