"""Read-only table component for one page of rows."""

from __future__ import annotations

import pandas as pd
import streamlit as st

from pagination_control.utils.pagination import page_slice


def page_caption(page_index: int, page_size: int, total_rows: int) -> str:
    """Describe the visible row range, e.g. ``Rows 26-50 of 500``."""
    if total_rows <= 0:
        return "Rows 0 of 0"
    start, end = page_slice(page_index, page_size)
    return f"Rows {start + 1}-{min(end, total_rows)} of {total_rows}"


def render_table(page_df: pd.DataFrame, page_index: int, page_size: int, total_rows: int) -> None:
    """Render the rows of the current page with a range caption."""
    if page_df.empty:
        st.info("No rows available.")
        return

    st.caption(page_caption(page_index, page_size, total_rows))
    st.dataframe(
        page_df,
        hide_index=True,
        width="stretch",
    )
