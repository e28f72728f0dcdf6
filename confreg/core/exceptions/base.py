"""
Base exception classes for the confreg package.
"""


class ConfRegError(Exception):
    """Base exception for all confreg errors."""
    pass


class ConfigurationError(ConfRegError):
    """Base exception for configuration errors."""

    def __init__(self, config_key: str = None, config_value: str = None, reason: str = None):
        self.config_key = config_key
        self.config_value = config_value
        self.reason = reason
        message = "Configuration error"
        if config_key:
            message += f" for '{config_key}'"
        if config_value:
            message += f" with value '{config_value}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class SettingsError(ConfigurationError):
    """Raised when a settings source cannot be read or written."""

    def __init__(self, source: str, reason: str = None):
        self.source = source
        super().__init__(config_key=source, reason=reason)
