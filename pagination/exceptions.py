"""
Exceptions raised by the pagination library.
"""


class PaginationError(ValueError):
    """Base class for pagination errors."""


class InvalidConfiguration(PaginationError):
    """Raised when a paginator setting is assigned an unusable value."""
