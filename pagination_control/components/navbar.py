"""Top navigation bar component."""

from __future__ import annotations

import streamlit as st


def render_navbar(source_label: str, page_index: int, total_pages: int) -> None:
    """Render the header with the data source and current page position."""
    st.markdown(
        f"""
        <div class="navbar">
            <div class="navbar-title">Page Window Explorer</div>
            <div class="navbar-meta">{source_label} | Page {page_index + 1} of {total_pages}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )
