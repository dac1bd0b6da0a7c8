"""Custom exceptions for conditions that are not input validation."""


class ConfigError(Exception):
    """Raised when the YAML configuration cannot be loaded or used."""
