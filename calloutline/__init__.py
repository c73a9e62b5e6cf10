"""Callout outline - chat callouts as outline headings."""

__version__ = "0.1.0"
