"""Custom exceptions."""


class ConfigError(Exception):
    """Raised when configuration loading fails."""


class ExampleLoadError(RuntimeError):
    """Raised when an example record cannot be fetched or parsed."""
