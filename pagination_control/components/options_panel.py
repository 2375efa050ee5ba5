"""Sidebar panel for pagination settings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

import streamlit as st

from pagination_control.config import (
    DEFAULT_MAX_PAGES_SHOWN,
    DEFAULT_PAGE_SIZE,
    DEFAULT_SAMPLE_ROWS,
    ELLIPSIS_OPTION_LABELS,
    MAX_PAGES_SHOWN_OPTIONS,
    MAX_SAMPLE_ROWS,
    PAGE_SIZE_OPTIONS,
)
from pagination_control.services.page_window import EllipsisOptions


@dataclass(frozen=True)
class PaginationSettings:
    row_count: int
    page_size: int
    max_pages_shown: int
    ellipsis_options: EllipsisOptions

    def calculator_signature(self) -> Tuple[int, EllipsisOptions]:
        """Settings that require a new calculator when they change."""
        return self.max_pages_shown, self.ellipsis_options


def render_options_panel(use_sample_rows: bool) -> PaginationSettings:
    """Render pagination controls in the sidebar and return the chosen settings."""
    st.sidebar.markdown("## Pagination")

    row_count = DEFAULT_SAMPLE_ROWS
    if use_sample_rows:
        row_count = st.sidebar.number_input(
            "Rows",
            min_value=0,
            max_value=MAX_SAMPLE_ROWS,
            value=DEFAULT_SAMPLE_ROWS,
            step=50,
            key="option_row_count",
        )

    page_size = st.sidebar.selectbox(
        "Rows per page",
        options=PAGE_SIZE_OPTIONS,
        index=PAGE_SIZE_OPTIONS.index(DEFAULT_PAGE_SIZE),
        key="option_page_size",
    )
    max_pages_shown = st.sidebar.selectbox(
        "Page buttons",
        options=MAX_PAGES_SHOWN_OPTIONS,
        index=MAX_PAGES_SHOWN_OPTIONS.index(DEFAULT_MAX_PAGES_SHOWN),
        key="option_max_pages_shown",
    )

    st.sidebar.markdown("## Ellipsis")
    defaults = EllipsisOptions()
    switches: Dict[str, bool] = {}
    for name, label in ELLIPSIS_OPTION_LABELS.items():
        switches[name] = st.sidebar.checkbox(
            label,
            value=getattr(defaults, name),
            key=f"option_{name}",
        )

    return PaginationSettings(
        row_count=int(row_count),
        page_size=int(page_size),
        max_pages_shown=int(max_pages_shown),
        ellipsis_options=EllipsisOptions(**switches),
    )
