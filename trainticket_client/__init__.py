"""HTTP client classes and random test-data helpers for a train-ticket booking system."""

__version__ = "0.1.0"