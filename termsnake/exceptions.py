# termsnake/exceptions.py

"""
Custom exceptions for the termsnake package.

Game over is not an exception; these cover the failures that happen around
the game, at startup and while reading configuration.
"""

class TermsnakeError(Exception):
    """Base exception for all termsnake errors."""

class DisplayInitError(TermsnakeError):
    """Raised when the terminal display surface cannot be created or initialized."""
    def __init__(self, message: str = None, original_error: Exception = None):
        msg = message or "Failed to initialize the terminal display"
        if original_error:
            msg = f"{msg}: {str(original_error)}"
        super().__init__(msg)
        self.original_error = original_error

class ConfigurationError(TermsnakeError):
    """Raised when there are issues with the provided configuration."""
    def __init__(self, message: str, field: str = None):
        msg = f"Configuration error"
        if field:
            msg = f"{msg} in '{field}'"
        msg = f"{msg}: {message}"
        super().__init__(msg)
        self.field = field
