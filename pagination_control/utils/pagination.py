"""Zero-based page arithmetic for server-side table slicing."""

from __future__ import annotations

import math
from typing import Tuple


def compute_total_pages(total_rows: int, page_size: int) -> int:
    """Compute the total number of pages for the provided page size."""
    if page_size <= 0:
        return 1
    return max(1, math.ceil(total_rows / page_size))


def clamp_page_index(page_index: int, total_pages: int) -> int:
    """Clamp a zero-based page index into ``[0, total_pages - 1]``."""
    return min(max(page_index, 0), max(total_pages, 1) - 1)


def page_slice(page_index: int, page_size: int) -> Tuple[int, int]:
    """Return start/end row offsets for a zero-based page."""
    start = page_index * page_size
    end = start + page_size
    return start, end
