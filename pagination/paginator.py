"""
Paginator value holder.

Derives the page count, a sliding window of page links, previous/next
navigation and the item range of the current page from three numbers: the
total item count, the number of items per page and the current page.

Example:
    paginator = Paginator(1000, 50, 8, "/items?page=(:num)")
    paginator.num_pages      # 20
    paginator.next_url       # "/items?page=9"
    paginator.to_html()      # <ul class="pagination">...</ul>
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from markupsafe import Markup

from pagination.exceptions import InvalidConfiguration
from pagination.rendering import render_pagination
from pagination.window import sliding_window

logger = logging.getLogger(__name__)

NUM_PLACEHOLDER = "(:num)"
ELLIPSIS = "..."
MIN_PAGES_TO_SHOW = 3


@dataclass(frozen=True)
class Page:
    """One entry of the page list: a real page or an ellipsis."""
    num: Union[int, str]
    url: Optional[str]
    is_current: bool = False

    @property
    def is_ellipsis(self) -> bool:
        return self.url is None

    def to_dict(self) -> Dict[str, Any]:
        return {"num": self.num, "url": self.url, "is_current": self.is_current}


class Paginator:
    """Pagination metadata for a collection the caller owns.

    Only max_pages_to_show is validated. Degenerate inputs (zero items per
    page, out-of-range current page) give empty or None results instead of
    errors. Instances are not safe for concurrent mutation.
    """

    def __init__(self, total_items: int, items_per_page: int, current_page: int, url_pattern: str = ""):
        """
        Args:
            total_items: Total number of items across all pages
            items_per_page: Number of items per page
            current_page: Current page number (1-based, not range checked)
            url_pattern: Page URL with (:num) as placeholder, e.g. '/foo/page/(:num)'
        """
        self._total_items = total_items
        self._items_per_page = items_per_page
        self._current_page = current_page
        self._url_pattern = url_pattern
        self._max_pages_to_show = 10
        self._num_pages = 0
        self.previous_text = "Previous"
        self.next_text = "Next"

        self._update_num_pages()

    def __repr__(self) -> str:
        return (
            f"Paginator(total_items={self._total_items}, items_per_page={self._items_per_page}, "
            f"current_page={self._current_page}, url_pattern={self._url_pattern!r})"
        )

    def _update_num_pages(self) -> None:
        if self._items_per_page == 0:
            self._num_pages = 0
        else:
            # Integer ceiling division
            self._num_pages = -(-self._total_items // self._items_per_page)
        logger.debug(f"Recomputed num_pages={self._num_pages} for {self!r}")

    # ===== Configuration =====

    @property
    def max_pages_to_show(self) -> int:
        return self._max_pages_to_show

    @max_pages_to_show.setter
    def max_pages_to_show(self, max_pages_to_show: int) -> None:
        if max_pages_to_show < MIN_PAGES_TO_SHOW:
            raise InvalidConfiguration(f"max_pages_to_show cannot be less than {MIN_PAGES_TO_SHOW}.")
        self._max_pages_to_show = max_pages_to_show

    @property
    def current_page(self) -> int:
        return self._current_page

    @current_page.setter
    def current_page(self, current_page: int) -> None:
        self._current_page = current_page

    @property
    def items_per_page(self) -> int:
        return self._items_per_page

    @items_per_page.setter
    def items_per_page(self, items_per_page: int) -> None:
        self._items_per_page = items_per_page
        self._update_num_pages()

    @property
    def total_items(self) -> int:
        return self._total_items

    @total_items.setter
    def total_items(self, total_items: int) -> None:
        self._total_items = total_items
        self._update_num_pages()

    @property
    def num_pages(self) -> int:
        return self._num_pages

    @property
    def url_pattern(self) -> str:
        return self._url_pattern

    @url_pattern.setter
    def url_pattern(self, url_pattern: str) -> None:
        self._url_pattern = url_pattern

    def set_previous_text(self, text: str) -> "Paginator":
        """Change the previous-link label. Returns self for chaining."""
        self.previous_text = text
        return self

    def set_next_text(self, text: str) -> "Paginator":
        """Change the next-link label. Returns self for chaining."""
        self.next_text = text
        return self

    def get_page_url(self, page_num: int) -> str:
        """Substitute page_num for every placeholder in the URL pattern."""
        return self._url_pattern.replace(NUM_PLACEHOLDER, str(page_num))

    # ===== Navigation =====

    @property
    def next_page(self) -> Optional[int]:
        if self._current_page < self._num_pages:
            return self._current_page + 1
        return None

    @property
    def prev_page(self) -> Optional[int]:
        if self._current_page > 1:
            return self._current_page - 1
        return None

    @property
    def next_url(self) -> Optional[str]:
        next_page = self.next_page
        if next_page is None:
            return None
        return self.get_page_url(next_page)

    @property
    def prev_url(self) -> Optional[str]:
        prev_page = self.prev_page
        if prev_page is None:
            return None
        return self.get_page_url(prev_page)

    @property
    def pages(self) -> List[Page]:
        """
        Page descriptors for the navigable window.

        Example for 10 pages, current page 4, max_pages_to_show 5:
            [Page(1, '/page/1'), Page('...', None), Page(3, '/page/3'),
             Page(4, '/page/4', is_current=True), Page(5, '/page/5'),
             Page('...', None), Page(10, '/page/10')]
        """
        pages = []
        for num in sliding_window(self._num_pages, self._current_page, self._max_pages_to_show):
            if num is None:
                pages.append(Page(ELLIPSIS, None, False))
            else:
                pages.append(Page(num, self.get_page_url(num), num == self._current_page))
        return pages

    # ===== Item ranges =====

    @property
    def current_page_first_item(self) -> Optional[int]:
        """1-based index of the first item on the current page, or None past the data."""
        first = (self._current_page - 1) * self._items_per_page + 1
        if first > self._total_items:
            return None
        return first

    @property
    def current_page_last_item(self) -> Optional[int]:
        """1-based index of the last item on the current page, or None past the data."""
        first = self.current_page_first_item
        if first is None:
            return None
        return min(first + self._items_per_page - 1, self._total_items)

    # ===== Rendering =====

    def to_html(self) -> Markup:
        if self._num_pages <= 1:
            return Markup("")
        return render_pagination(
            self.pages,
            prev_url=self.prev_url,
            next_url=self.next_url,
            previous_text=self.previous_text,
            next_text=self.next_text,
        )

    def __html__(self) -> Markup:
        return self.to_html()

    def __str__(self) -> str:
        return str(self.to_html())
