"""
Domain-specific exception hierarchy for calendarkit.
"""


class CalendarKitError(Exception):
    """Base class for all library-level errors."""


class InvalidDateError(CalendarKitError, ValueError):
    """Raised when a value cannot be interpreted as a date or instant."""

    def __init__(self, value: object, reason: str | None = None) -> None:
        message = f"Invalid date: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.value = value


class ConfigError(CalendarKitError):
    """Raised when the configuration file is missing or malformed."""


class ConfigFileNotFoundError(ConfigError, FileNotFoundError):
    """Raised when the configuration file does not exist."""
