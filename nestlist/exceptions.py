"""
Custom exceptions for the nestlist application.
"""


class NestlistError(Exception):
    """Base exception for all nestlist-related errors."""
    pass


class ConfigurationError(NestlistError):
    """Raised when page options or config files are invalid."""
    pass


class StorageError(NestlistError):
    """Raised when a tree or options file cannot be read or written."""
    pass


class TerminalError(NestlistError):
    """Raised when the terminal cannot be initialized or read from."""
    pass
