"""
Custom exceptions for the shell.
"""


class BaseAppError(Exception):
    """Base exception class for shell errors."""

    pass


class FileSystemError(BaseAppError):
    """Exception raised when a filesystem operation fails."""

    pass


class UsageError(BaseAppError):
    """Exception raised when a command is invoked with bad arguments."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass
