"""Visible page window calculation for page-number controls.

A page-number control shows a bounded number of slots for an arbitrarily
large page count: the first and last page pinned at the edges, a window of
pages around the current one, and ellipsis markers standing in for the hidden
ranges. ``PageWindowCalculator`` derives those slots for a current page and
resolves clicks on them, including ellipsis clicks, to a target page.

All page values are zero-based. The current page passed to either operation
is expected to lie in ``[0, last_page_index]``; values outside that range are
clamped rather than rejected.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, fields
from typing import Dict, List, Mapping, Optional, Tuple, Union

from pagination_control.config import DEFAULT_MAX_PAGES_SHOWN, ELLIPSIS
from pagination_control.utils.logging_config import get_logger
from pagination_control.utils.pagination import clamp_page_index

logger = get_logger(__name__)

WindowSlot = Union[int, str]

OVERWRITE = "overwrite"
INSERT = "insert"

# (ellipsis_counts_as_page, enable_first_last) -> (action, slots from the window edge)
PLACEMENT_TABLE: Dict[Tuple[bool, bool], Tuple[str, int]] = {
    (True, True): (OVERWRITE, 1),
    (True, False): (OVERWRITE, 0),
    (False, True): (INSERT, 1),
    (False, False): (INSERT, 0),
}

CAMEL_CASE_OPTIONS = {
    "enableEllipsis": "enable_ellipsis",
    "ellipsisCountsAsPage": "ellipsis_counts_as_page",
    "showEllipsisIfOnlyOnePage": "show_ellipsis_if_only_one_page",
    "enableEllipsisClick": "enable_ellipsis_click",
    "enableFirstLast": "enable_first_last",
}


@dataclass(frozen=True)
class EllipsisOptions:
    """Display switches for ellipsis markers and first/last pinning.

    ``show_ellipsis_if_only_one_page`` only matters when the ellipsis does not
    count as a page: a hidden range of exactly one page is then shown as that
    page's number instead of a marker.
    """

    enable_ellipsis: bool = True
    ellipsis_counts_as_page: bool = True
    show_ellipsis_if_only_one_page: bool = True
    enable_ellipsis_click: bool = True
    enable_first_last: bool = True

    @classmethod
    def from_mapping(cls, options: Optional[Mapping[str, object]]) -> "EllipsisOptions":
        """Build options from snake_case or camelCase keys, ignoring unknown ones."""
        if not options:
            return cls()

        known_fields = {field.name for field in fields(cls)}
        values: Dict[str, bool] = {}
        for key, value in options.items():
            name = CAMEL_CASE_OPTIONS.get(key, key)
            if name in known_fields:
                values[name] = bool(value)
        return cls(**values)


def is_ellipsis(slot: object) -> bool:
    """Return True for any slot that is not a finite number."""
    if isinstance(slot, bool) or not isinstance(slot, numbers.Real):
        return True
    return not math.isfinite(slot)


def _overwrite(window: List[WindowSlot], index: int, value: WindowSlot) -> None:
    """Overwrite a slot in place; one past the end extends the window."""
    if index < 0:
        return
    if index < len(window):
        window[index] = value
    else:
        window.append(value)


def _neighbour_page(window: List[WindowSlot], index: int, step: int) -> WindowSlot:
    """Return the page adjacent to ``window[index]``, or the marker if there is none."""
    if 0 <= index < len(window) and not is_ellipsis(window[index]):
        return window[index] + step
    return ELLIPSIS


class PageWindowCalculator:
    """Compute the visible page window and resolve clicks on it.

    Configuration is fixed at construction. The total page count may change
    at any time through ``set_total_pages``. Instances are not synchronised;
    use one per consumer.
    """

    def __init__(
        self,
        total_pages: int,
        max_pages_shown: int = DEFAULT_MAX_PAGES_SHOWN,
        ellipsis_options: Union[EllipsisOptions, Mapping[str, object], None] = None,
    ) -> None:
        self._max_pages_shown = max(int(max_pages_shown), 1)
        self._middle_index = self._max_pages_shown // 2

        if isinstance(ellipsis_options, EllipsisOptions):
            self._options = ellipsis_options
        else:
            self._options = EllipsisOptions.from_mapping(ellipsis_options)

        self._total_pages = 1
        self._last_page_index = 0
        self.set_total_pages(total_pages)

    @property
    def max_pages_shown(self) -> int:
        return self._max_pages_shown

    @property
    def middle_index(self) -> int:
        return self._middle_index

    @property
    def options(self) -> EllipsisOptions:
        return self._options

    @property
    def total_pages(self) -> int:
        return self._total_pages

    @property
    def last_page_index(self) -> int:
        return self._last_page_index

    def set_total_pages(self, new_total: float) -> None:
        """Set the page count, rounding fractions up and clamping to at least one page."""
        self._total_pages = max(math.ceil(new_total), 1)
        self._last_page_index = self._total_pages - 1
        logger.debug("total_pages_updated", total_pages=self._total_pages)

    def compute_window(self, current_page: int) -> List[WindowSlot]:
        """Return the page indices and ellipsis markers to display for ``current_page``.

        The window holds at most ``max_pages_shown`` slots, plus one per side
        when an ellipsis does not count as a page. With a single slot and a
        counting ellipsis, ``max_pages_shown=1`` yields two slots (``[0, last]``)
        once pages are hidden before the current one; on the first page the
        single slot is overwritten by the last-page pin.
        """
        current_page = clamp_page_index(current_page, self._total_pages)

        window = self._base_window(current_page)
        if self._options.enable_ellipsis:
            window = self._apply_ellipsis(window)

        if self._options.enable_first_last:
            window[0] = 0
            window[-1] = self._last_page_index

        logger.debug("window_computed", current_page=current_page, window=window)
        return window

    def resolve_click(
        self,
        current_page: int,
        clicked_value: object,
        button_index: int,
    ) -> Optional[int]:
        """Resolve a clicked slot to the page to navigate to.

        Page slots navigate to themselves. An ellipsis jumps halfway between
        the current page and the edge it stands for, which is inferred from
        the button's position in the rendered window. Returns None when
        ellipsis clicks are disabled; callers should ignore the click.
        """
        if not is_ellipsis(clicked_value):
            return int(clicked_value)

        if not self._options.enable_ellipsis_click:
            return None

        current_page = clamp_page_index(current_page, self._total_pages)
        if button_index < self._middle_index:
            target = current_page // 2
        else:
            target = math.ceil((current_page + self._last_page_index) / 2)

        logger.info(
            "ellipsis_click_resolved",
            current_page=current_page,
            button_index=button_index,
            target_page=target,
        )
        return target

    def _base_window(self, current_page: int) -> List[WindowSlot]:
        window_len = min(self._max_pages_shown, self._total_pages)

        if current_page < self._middle_index:
            start = 0
        elif current_page > self._last_page_index - self._middle_index:
            start = self._last_page_index - window_len + 1
        else:
            start = current_page - self._middle_index

        return list(range(start, start + window_len))

    def _apply_ellipsis(self, window: List[WindowSlot]) -> List[WindowSlot]:
        options = self._options
        action, edge = PLACEMENT_TABLE[(options.ellipsis_counts_as_page, options.enable_first_last)]
        substitute_single = not options.ellipsis_counts_as_page and options.show_ellipsis_if_only_one_page

        middle_page = window[len(window) // 2]
        first_shown = middle_page - self._middle_index
        last_shown = middle_page + self._middle_index

        if first_shown > 0:
            value = ELLIPSIS
            if substitute_single and first_shown == 1:
                value = _neighbour_page(window, edge, -1)
            if action == OVERWRITE:
                _overwrite(window, edge, value)
            else:
                window.insert(edge, value)

        if last_shown < self._last_page_index:
            anchor = len(window) - 1 - edge
            value = ELLIPSIS
            if substitute_single and last_shown == self._last_page_index - 1:
                value = _neighbour_page(window, anchor, 1)
            if action == OVERWRITE:
                _overwrite(window, anchor, value)
            else:
                window.insert(anchor + 1, value)

        return window
