"""Streamlit app entrypoint for the Page Window Explorer."""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

import pandas as pd
import streamlit as st

from pagination_control.components.navbar import render_navbar
from pagination_control.components.options_panel import PaginationSettings, render_options_panel
from pagination_control.components.page_buttons import render_page_buttons
from pagination_control.components.table import render_table
from pagination_control.config import ASSETS_DIR, ROWS_FILE
from pagination_control.services import data_loader
from pagination_control.services.page_window import PageWindowCalculator, WindowSlot
from pagination_control.utils.logging_config import get_logger, setup_logging
from pagination_control.utils.pagination import clamp_page_index, compute_total_pages


st.set_page_config(page_title="Page Window Explorer", layout="wide")

logger = get_logger(__name__)


def load_css() -> None:
    """Load app-level CSS styling from the assets directory."""
    css_path = ASSETS_DIR / "styles.css"
    if css_path.exists():
        with css_path.open("r", encoding="utf-8") as css_file:
            st.markdown(f"<style>{css_file.read()}</style>", unsafe_allow_html=True)


def init_session_state() -> None:
    """Initialize required session-state variables."""
    st.session_state.setdefault("page_index", 0)
    st.session_state.setdefault("calculator", None)
    st.session_state.setdefault("calculator_signature", None)
    st.session_state.setdefault("notifications", [])


def queue_notification(level: str, message: str) -> None:
    """Queue a UI notification for display on the next render pass."""
    st.session_state["notifications"].append((level, message))


def show_notifications() -> None:
    """Render queued status messages then clear the queue."""
    notifications: List[Tuple[str, str]] = st.session_state.get("notifications", [])
    if not notifications:
        return

    for level, message in notifications:
        if level == "success":
            st.success(message)
        elif level == "warning":
            st.warning(message)
        else:
            st.info(message)

    st.session_state["notifications"] = []


@st.cache_data(show_spinner=False)
def get_rows_from_file(rows_path: str, file_mtime: float) -> pd.DataFrame:
    """Load CSV rows with cache invalidation by mtime."""
    del file_mtime
    return data_loader.load_rows(Path(rows_path))


@st.cache_data(show_spinner=False)
def get_sample_rows(row_count: int) -> pd.DataFrame:
    """Build and cache synthetic rows for a row count."""
    return data_loader.build_sample_rows(row_count)


def get_calculator(settings: PaginationSettings, total_pages: int) -> PageWindowCalculator:
    """Reuse the session calculator, rebuilding it only when its configuration changes."""
    signature = settings.calculator_signature()
    calculator = st.session_state["calculator"]

    if calculator is None or st.session_state["calculator_signature"] != signature:
        calculator = PageWindowCalculator(
            total_pages,
            max_pages_shown=settings.max_pages_shown,
            ellipsis_options=settings.ellipsis_options,
        )
        st.session_state["calculator"] = calculator
        st.session_state["calculator_signature"] = signature
        logger.info(
            "calculator_configured",
            max_pages_shown=settings.max_pages_shown,
            total_pages=total_pages,
        )
    elif calculator.total_pages != total_pages:
        calculator.set_total_pages(total_pages)

    return calculator


def navigate(calculator: PageWindowCalculator, page_index: int, button_index: int, slot: WindowSlot) -> bool:
    """Apply a slot click and report whether the current page changed."""
    target = calculator.resolve_click(page_index, slot, button_index)
    if target is None:
        queue_notification("info", "Ellipsis navigation is disabled.")
        return False

    target = clamp_page_index(target, calculator.total_pages)
    if target == page_index:
        return False

    logger.info("page_navigated", from_page=page_index, to_page=target)
    st.session_state["page_index"] = target
    return True


def main() -> None:
    """Render and run the Page Window Explorer."""
    setup_logging()
    load_css()
    init_session_state()

    use_sample_rows = not ROWS_FILE.exists()
    settings = render_options_panel(use_sample_rows)

    try:
        if use_sample_rows:
            rows_df = get_sample_rows(settings.row_count)
            source_label = "Sample rows"
        else:
            rows_df = get_rows_from_file(str(ROWS_FILE), ROWS_FILE.stat().st_mtime)
            source_label = ROWS_FILE.name
    except FileNotFoundError as exc:
        st.error(str(exc))
        st.stop()
    except Exception as exc:  # pragma: no cover - streamlit runtime guard
        logger.exception("rows_load_failed")
        st.error(f"Loading rows failed: {exc}")
        st.stop()

    total_rows = len(rows_df)
    total_pages = compute_total_pages(total_rows, settings.page_size)
    calculator = get_calculator(settings, total_pages)

    page_index = clamp_page_index(st.session_state["page_index"], calculator.total_pages)
    st.session_state["page_index"] = page_index

    render_navbar(source_label, page_index, calculator.total_pages)

    window = calculator.compute_window(page_index)
    clicked = render_page_buttons(window, page_index)
    if clicked is not None:
        button_index, slot = clicked
        if navigate(calculator, page_index, button_index, slot):
            st.rerun()

    page_df = data_loader.get_page(rows_df, page_index, settings.page_size)
    render_table(page_df, page_index, settings.page_size, total_rows)

    show_notifications()


if __name__ == "__main__":
    main()
