"""Domain-specific exceptions for the expense log."""

class ValidationError(ValueError):
    """Raised when user-supplied data does not meet entry requirements."""


class PersistenceError(IOError):
    """Raised when the expense log file cannot be written."""
