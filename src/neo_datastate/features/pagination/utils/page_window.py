"""Page window computation for page-number navigation controls."""

from typing import List

from ..entities.pagination_state import ELLIPSIS, PageMarker

# Maximum number of page buttons shown before ellipses kick in
MAX_VISIBLE_PAGES = 5


def get_page_numbers(current_page: int, total_pages: int) -> List[PageMarker]:
    """Compute the page markers to render.

    Up to MAX_VISIBLE_PAGES pages are all listed. Beyond that the first and
    last page are always present, the current page is shown with one
    neighbour on each side, and ELLIPSIS stands in for each skipped run.

    Args:
        current_page: 1-based current page
        total_pages: Total number of pages (>= 1)

    Returns:
        Page numbers interleaved with at most two ELLIPSIS markers
    """
    if total_pages <= MAX_VISIBLE_PAGES:
        return list(range(1, total_pages + 1))

    pages: List[PageMarker] = [1]

    window_start = max(2, current_page - 1)
    window_end = min(total_pages - 1, current_page + 1)

    if window_start > 2:
        pages.append(ELLIPSIS)

    pages.extend(range(window_start, window_end + 1))

    if window_end < total_pages - 1:
        pages.append(ELLIPSIS)

    pages.append(total_pages)
    return pages
