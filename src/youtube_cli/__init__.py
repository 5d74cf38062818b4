"""Async client and CLI for the YouTube Data API v3."""

__version__ = "0.1.0"
