"""Errors raised by the table presenter."""


class ConfigurationError(ValueError):
    """Raised when a table view is built or driven with invalid options."""
