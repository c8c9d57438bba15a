"""
Custom exception hierarchy for NoteLens.

All exceptions inherit from NoteLensError so callers can catch
everything raised by the package with a single handler.
"""


class NoteLensError(Exception):
    """
    Base exception for all NoteLens errors.
    All custom exceptions should inherit from this class.
    """

    def __init__(self, message: str, context: dict | None = None):
        """
        Initialize NoteLens error.
        Args:
            message: Error message
            context: Optional context dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class ValidationError(NoteLensError):
    """
    Validation errors.
    Raised when analysis input is not a well-formed note collection.
    """

    pass


class ConfigurationError(NoteLensError):
    """
    Configuration errors.
    Raised when configuration is invalid or missing required values.
    """

    pass


class StoreError(NoteLensError):
    """
    Key-value store errors.
    Raised when persisted state cannot be read or written.
    """

    pass
