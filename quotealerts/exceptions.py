# quotealerts/exceptions.py
"""Custom exceptions for quotealerts."""


class QuoteAlertsError(Exception):
    """Base exception for quotealerts operations."""


class AlertConfigError(QuoteAlertsError, ValueError):
    """Alert transform was registered with an invalid configuration."""
