class EventError(Exception):
    """Base exception for all event conversion errors."""


class UnsupportedShapeError(EventError):
    """Raised when a value matches none of the recognized event shapes."""


class MalformedIdentifierError(EventError, ValueError):
    """Raised when an identifier cannot be split into words."""
