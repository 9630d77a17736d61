"""
HTML rendering for pagination controls.

Builds a Bootstrap-style ``<ul class="pagination">`` list from already computed
page descriptors. Caller-influenced text (URLs, labels, page numbers) is
escaped by Markup.format.
"""

from typing import Iterable, Optional

from markupsafe import Markup


def render_pagination(
    pages: Iterable,
    prev_url: Optional[str] = None,
    next_url: Optional[str] = None,
    previous_text: str = "Previous",
    next_text: str = "Next",
) -> Markup:
    """
    Render page descriptors as an HTML navigation list.

    Args:
        pages: Page descriptors (objects with num, url and is_current); pages
            without a url render as disabled entries
        prev_url: URL of the previous page; None or empty omits the link
        next_url: URL of the next page; None or empty omits the link
        previous_text: Label of the previous-page link
        next_text: Label of the next-page link

    Returns:
        Markup for the list, or empty Markup when there are no pages
    """
    pages = list(pages)
    if not pages:
        return Markup("")

    items = []
    if prev_url:
        items.append(Markup('<li><a href="{}">&laquo; {}</a></li>').format(prev_url, previous_text))

    for page in pages:
        if not page.url:
            items.append(Markup('<li class="disabled"><span>{}</span></li>').format(page.num))
        elif page.is_current:
            items.append(Markup('<li class="active"><a href="{}">{}</a></li>').format(page.url, page.num))
        else:
            items.append(Markup('<li><a href="{}">{}</a></li>').format(page.url, page.num))

    if next_url:
        items.append(Markup('<li><a href="{}">{} &raquo;</a></li>').format(next_url, next_text))

    return Markup('<ul class="pagination">') + Markup("").join(items) + Markup("</ul>")
