"""Shared fixtures for unit tests."""

from __future__ import annotations

import pytest

from pagination_control.services.page_window import EllipsisOptions, PageWindowCalculator


@pytest.fixture
def calculator() -> PageWindowCalculator:
    """Twenty pages, seven buttons, default ellipsis options."""
    return PageWindowCalculator(total_pages=20, max_pages_shown=7)


@pytest.fixture
def inserting_options() -> EllipsisOptions:
    """Ellipsis markers take extra slots instead of replacing page slots."""
    return EllipsisOptions(ellipsis_counts_as_page=False, show_ellipsis_if_only_one_page=True)
