"""Ward AI - token risk scoring service."""

__version__ = "0.1.0"
