"""
Pagination metadata and navigation markup.
"""

from .exceptions import PaginationError, InvalidConfiguration
from .paginator import Paginator, Page, ELLIPSIS, NUM_PLACEHOLDER
from .rendering import render_pagination
from .window import sliding_window
from .service import PaginationService

__all__ = [
    'Paginator',
    'Page',
    'ELLIPSIS',
    'NUM_PLACEHOLDER',
    'PaginationError',
    'InvalidConfiguration',
    'render_pagination',
    'sliding_window',
    'PaginationService',
]
