"""Passion Hub - a multi-category personal journal client."""

__version__ = "0.1.0"
