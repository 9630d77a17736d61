"""
Service for building paginators from application configuration.

Provides pure, testable pagination functions independent of HTTP/Flask context.
Applies the configured defaults (items per page, window size, labels, URL
pattern) and serializes paginator state for API responses.
"""

import logging
from typing import Any, Dict, Optional

from markupsafe import Markup

from config import (
    PAGINATION_DEFAULT_PER_PAGE,
    PAGINATION_MAX_PAGES_TO_SHOW,
    PAGINATION_NEXT_TEXT,
    PAGINATION_PREVIOUS_TEXT,
    PAGINATION_URL_PATTERN,
)
from pagination.paginator import Paginator

logger = logging.getLogger(__name__)


class PaginationService:
    """Service for paginator construction and serialization."""

    def __init__(
        self,
        per_page: int = PAGINATION_DEFAULT_PER_PAGE,
        max_pages_to_show: int = PAGINATION_MAX_PAGES_TO_SHOW,
        url_pattern: str = PAGINATION_URL_PATTERN,
        previous_text: str = PAGINATION_PREVIOUS_TEXT,
        next_text: str = PAGINATION_NEXT_TEXT,
    ):
        self.per_page = per_page
        self.max_pages_to_show = max_pages_to_show
        self.url_pattern = url_pattern
        self.previous_text = previous_text
        self.next_text = next_text

    def create_paginator(
        self,
        total_items: int,
        page: int = 1,
        per_page: Optional[int] = None,
        url_pattern: Optional[str] = None,
        max_pages_to_show: Optional[int] = None,
    ) -> Paginator:
        """
        Build a paginator, filling unspecified settings from the service defaults.

        Args:
            total_items: Total number of items
            page: Current page number (1-indexed)
            per_page: Items per page
            url_pattern: Page URL pattern containing (:num)
            max_pages_to_show: Window size for the page list

        Returns:
            Configured Paginator

        Raises:
            InvalidConfiguration: If the window size is less than 3
        """
        paginator = Paginator(
            total_items,
            self.per_page if per_page is None else per_page,
            page,
            self.url_pattern if url_pattern is None else url_pattern,
        )
        paginator.max_pages_to_show = self.max_pages_to_show if max_pages_to_show is None else max_pages_to_show
        paginator.set_previous_text(self.previous_text).set_next_text(self.next_text)

        logger.debug(f"Created {paginator!r} with max_pages_to_show={paginator.max_pages_to_show}")
        return paginator

    def calculate_pagination(self, paginator: Paginator) -> Dict[str, Any]:
        """
        Serialize pagination metadata.

        Args:
            paginator: Paginator to describe

        Returns:
            Dict with page count, navigation, item range and page list
        """
        return {
            "total_items": paginator.total_items,
            "items_per_page": paginator.items_per_page,
            "current_page": paginator.current_page,
            "num_pages": paginator.num_pages,
            "max_pages_to_show": paginator.max_pages_to_show,
            "url_pattern": paginator.url_pattern,
            "next_page": paginator.next_page,
            "prev_page": paginator.prev_page,
            "next_url": paginator.next_url,
            "prev_url": paginator.prev_url,
            "current_page_first_item": paginator.current_page_first_item,
            "current_page_last_item": paginator.current_page_last_item,
            "pages": [page.to_dict() for page in paginator.pages],
        }

    def render_html(self, paginator: Paginator) -> Markup:
        """Render the paginator's navigation markup."""
        return paginator.to_html()
