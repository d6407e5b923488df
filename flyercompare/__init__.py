"""Flyer deal comparison: group, match and deduplicate scanned store deals."""

__version__ = "0.1.0"
