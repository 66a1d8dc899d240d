"""Cleanup of Bloodhound drilling-log exports into depth-indexed tables."""

__version__ = "0.1.0"
