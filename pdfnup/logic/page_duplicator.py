# PDFNup/pdfnup/logic/page_duplicator.py
"""
Pure page-order generation for the duplicate operation.
No file I/O, no PDF objects, just source page indices.
"""

from typing import List

from .errors import InvalidArgument

PageIndex = int


def duplicate(page_count: int, copies_per_page: int) -> List[PageIndex]:
    """
    Expand a page sequence so every page repeats in place.

    Each original index appears ``copies_per_page`` consecutive times and
    the original page order is preserved:

        duplicate(2, 3) -> [0, 0, 0, 1, 1, 1]

    Args:
        page_count: Number of pages in the source PDF
        copies_per_page: How many times each page appears in the output

    Returns:
        Ordered list of source page indices

    Raises:
        InvalidArgument: copies_per_page is not a positive integer, or
            page_count is negative
    """
    if isinstance(copies_per_page, bool) or not isinstance(copies_per_page, int):
        raise InvalidArgument(f"Copy count must be a whole number, got {copies_per_page!r}")
    if copies_per_page < 1:
        raise InvalidArgument(f"Copy count must be at least 1, got {copies_per_page}")
    if page_count < 0:
        raise InvalidArgument(f"Page count cannot be negative, got {page_count}")

    return [index for index in range(page_count) for _ in range(copies_per_page)]
