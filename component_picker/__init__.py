"""Feedback component picker: recommends UI feedback components for a
message's severity and type."""

__version__ = "1.0.0"
