"""Domain models and HTTP error responses for a music aggregation service."""

__version__ = "0.1.0"