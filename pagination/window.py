"""
Sliding window page-list algorithm.

Pure functions with no knowledge of URLs or markup, so the window logic can be
exercised on plain page numbers.
"""

from typing import List, Optional


def sliding_window(num_pages: int, current_page: int, max_pages_to_show: int) -> List[Optional[int]]:
    """
    Compute the page numbers to display around the current page.

    Args:
        num_pages: Total number of pages
        current_page: Current page number (may be out of range)
        max_pages_to_show: Window size, at least 3

    Returns:
        Ordered page numbers, with None marking an ellipsis. Empty when there
        is at most one page.
    """
    if num_pages <= 1:
        return []

    if num_pages <= max_pages_to_show:
        return list(range(1, num_pages + 1))

    # 3 slots are reserved for the first page, the last page and the current page
    num_adjacents = (max_pages_to_show - 3) // 2

    if current_page + num_adjacents > num_pages:
        sliding_start = num_pages - max_pages_to_show + 2
    else:
        sliding_start = current_page - num_adjacents
    sliding_start = max(sliding_start, 2)

    sliding_end = min(sliding_start + max_pages_to_show - 3, num_pages - 1)

    window: List[Optional[int]] = [1]
    if sliding_start > 2:
        window.append(None)
    window.extend(range(sliding_start, sliding_end + 1))
    if sliding_end < num_pages - 1:
        window.append(None)
    window.append(num_pages)

    return window
