"""Scrape set lists and musician credits from Tiny Desk concert pages."""

__version__ = "0.1.0"
