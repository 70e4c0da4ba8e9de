"""Trip lifecycle service for fleet operations."""

__version__ = "1.0.0"
