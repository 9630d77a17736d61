"""
Unit tests for Paginator.

Covers the page count invariant, accessors, navigation, item ranges and the
page descriptors built on top of the sliding window.
"""

import pytest
from markupsafe import Markup

from pagination import Paginator, Page, ELLIPSIS, InvalidConfiguration, PaginationError


class TestNumPages:
    """Test page count derivation."""

    def test_exact_multiple(self):
        assert Paginator(1000, 50, 1).num_pages == 20

    def test_partial_last_page(self):
        assert Paginator(1001, 50, 1).num_pages == 21

    def test_fewer_items_than_page(self):
        assert Paginator(5, 10, 1).num_pages == 1

    def test_no_items(self):
        assert Paginator(0, 50, 1).num_pages == 0

    def test_zero_items_per_page(self):
        """Test that zero items per page is a degenerate input, not an error."""
        assert Paginator(100, 0, 1).num_pages == 0

    def test_negative_total_is_accepted(self):
        """Test that negative totals pass through the ceiling formula."""
        paginator = Paginator(-15, 10, 1)

        assert paginator.num_pages == -1
        assert paginator.pages == []
        assert paginator.next_page is None

    def test_items_per_page_setter_recomputes(self):
        """Test that changing items per page updates the page count immediately."""
        paginator = Paginator(1000, 50, 1)
        paginator.items_per_page = 100

        assert paginator.items_per_page == 100
        assert paginator.num_pages == 10

    def test_total_items_setter_recomputes(self):
        """Test that changing the total updates the page count immediately."""
        paginator = Paginator(1000, 50, 1)
        paginator.total_items = 30

        assert paginator.total_items == 30
        assert paginator.num_pages == 1

    def test_items_per_page_set_to_zero(self):
        paginator = Paginator(1000, 50, 1)
        paginator.items_per_page = 0

        assert paginator.num_pages == 0

    def test_num_pages_is_read_only(self):
        paginator = Paginator(1000, 50, 1)

        with pytest.raises(AttributeError):
            paginator.num_pages = 3


class TestConfiguration:
    """Test configuration accessors."""

    def test_defaults(self):
        paginator = Paginator(100, 10, 1)

        assert paginator.max_pages_to_show == 10
        assert paginator.url_pattern == ""
        assert paginator.previous_text == "Previous"
        assert paginator.next_text == "Next"

    def test_max_pages_to_show_rejects_small_values(self):
        """Test that a window below 3 is rejected and the old value kept."""
        paginator = Paginator(100, 10, 1)

        with pytest.raises(InvalidConfiguration, match="cannot be less than 3"):
            paginator.max_pages_to_show = 2

        assert paginator.max_pages_to_show == 10

    def test_invalid_configuration_is_value_error(self):
        paginator = Paginator(100, 10, 1)

        with pytest.raises(ValueError):
            paginator.max_pages_to_show = 0
        assert issubclass(InvalidConfiguration, PaginationError)

    def test_max_pages_to_show_accepts_three(self):
        paginator = Paginator(100, 10, 1)
        paginator.max_pages_to_show = 3

        assert paginator.max_pages_to_show == 3

    def test_current_page_is_not_range_checked(self):
        paginator = Paginator(100, 10, 1)
        paginator.current_page = 99

        assert paginator.current_page == 99

    def test_url_pattern_setter(self):
        paginator = Paginator(100, 10, 1)
        paginator.url_pattern = "/p/(:num)"

        assert paginator.get_page_url(3) == "/p/3"

    def test_fluent_label_setters(self):
        """Test that label setters chain."""
        paginator = Paginator(100, 10, 1)

        result = paginator.set_previous_text("Back").set_next_text("Forward")

        assert result is paginator
        assert paginator.previous_text == "Back"
        assert paginator.next_text == "Forward"


class TestPageUrl:
    """Test placeholder substitution."""

    def test_substitutes_placeholder(self):
        assert Paginator(100, 10, 1, "/p/(:num)").get_page_url(5) == "/p/5"

    def test_substitutes_every_placeholder(self):
        paginator = Paginator(100, 10, 1, "/p/(:num)?from=(:num)")

        assert paginator.get_page_url(5) == "/p/5?from=5"

    def test_pattern_without_placeholder(self):
        assert Paginator(100, 10, 1, "/static").get_page_url(5) == "/static"

    def test_empty_pattern(self):
        assert Paginator(100, 10, 1).get_page_url(5) == ""


class TestNavigation:
    """Test previous/next pages and URLs."""

    def test_middle_page(self, paginator):
        assert paginator.next_page == 9
        assert paginator.prev_page == 7
        assert paginator.next_url == "/items/page/9"
        assert paginator.prev_url == "/items/page/7"

    def test_first_page_has_no_previous(self, paginator):
        paginator.current_page = 1

        assert paginator.prev_page is None
        assert paginator.prev_url is None
        assert paginator.next_page == 2

    def test_last_page_has_no_next(self, paginator):
        paginator.current_page = 20

        assert paginator.next_page is None
        assert paginator.next_url is None
        assert paginator.prev_page == 19

    def test_page_beyond_range(self, paginator):
        paginator.current_page = 25

        assert paginator.next_page is None
        assert paginator.prev_page == 24

    def test_next_page_zero_still_has_url(self, paginator):
        """Test that page 0 is a real next page, distinct from no next page."""
        paginator.current_page = -1

        assert paginator.next_page == 0
        assert paginator.next_url == "/items/page/0"

    def test_no_pages(self):
        paginator = Paginator(0, 50, 1, "/p/(:num)")

        assert paginator.next_page is None
        assert paginator.prev_page is None


class TestPages:
    """Test page descriptors."""

    def test_truncated_pages(self, paginator):
        pages = paginator.pages

        assert [page.num for page in pages] == [1, ELLIPSIS, 5, 6, 7, 8, 9, 10, 11, 12, ELLIPSIS, 20]
        assert pages[0] == Page(1, "/items/page/1", False)
        assert pages[5] == Page(8, "/items/page/8", True)
        assert pages[-1] == Page(20, "/items/page/20", False)

    def test_ellipsis_descriptor(self, paginator):
        ellipsis = paginator.pages[1]

        assert ellipsis.is_ellipsis
        assert ellipsis.url is None
        assert ellipsis.is_current is False

    def test_untruncated_pages(self):
        paginator = Paginator(30, 10, 2, "/p/(:num)")

        assert paginator.pages == [
            Page(1, "/p/1", False),
            Page(2, "/p/2", True),
            Page(3, "/p/3", False),
        ]

    def test_single_page_gives_empty_list(self):
        assert Paginator(10, 10, 1).pages == []

    def test_exactly_one_current_page_in_range(self, paginator):
        for current in range(1, 21):
            paginator.current_page = current

            assert sum(page.is_current for page in paginator.pages) == 1

    @pytest.mark.parametrize("current", [0, 21, -4])
    def test_no_current_page_out_of_range(self, paginator, current):
        paginator.current_page = current

        assert not any(page.is_current for page in paginator.pages)

    def test_pages_follow_window_size(self, paginator):
        paginator.max_pages_to_show = 3

        assert [page.num for page in paginator.pages] == [1, ELLIPSIS, 8, ELLIPSIS, 20]

    def test_page_to_dict(self):
        assert Page(3, "/p/3", True).to_dict() == {"num": 3, "url": "/p/3", "is_current": True}
        assert Page(ELLIPSIS, None).to_dict() == {"num": "...", "url": None, "is_current": False}


class TestItemRange:
    """Test the item range of the current page."""

    def test_middle_page(self, paginator):
        assert paginator.current_page_first_item == 351
        assert paginator.current_page_last_item == 400

    def test_partial_last_page(self):
        paginator = Paginator(95, 10, 10)

        assert paginator.current_page_first_item == 91
        assert paginator.current_page_last_item == 95

    def test_page_beyond_data(self):
        paginator = Paginator(100, 10, 11)

        assert paginator.current_page_first_item is None
        assert paginator.current_page_last_item is None

    def test_no_items(self):
        paginator = Paginator(0, 50, 1)

        assert paginator.current_page_first_item is None
        assert paginator.current_page_last_item is None


class TestMarkupProtocol:
    """Test string conversion and Jinja/markupsafe integration."""

    def test_str_matches_to_html(self, paginator):
        assert str(paginator) == str(paginator.to_html())

    def test_empty_when_no_pages(self):
        paginator = Paginator(0, 50, 1)

        assert paginator.to_html() == ""
        assert str(paginator) == ""

    def test_not_escaped_inside_markup(self, paginator):
        """Test that __html__ keeps the control intact when embedded in other markup."""
        assert isinstance(paginator.__html__(), Markup)

        html = Markup("<nav>{}</nav>").format(paginator)

        assert html.startswith('<nav><ul class="pagination">')
        assert html.endswith("</ul></nav>")

    def test_repr(self):
        assert repr(Paginator(10, 5, 1, "/p/(:num)")) == (
            "Paginator(total_items=10, items_per_page=5, current_page=1, url_pattern='/p/(:num)')"
        )
