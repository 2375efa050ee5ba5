"""Unit tests for the pure helpers behind the Streamlit components."""

from __future__ import annotations

from pagination_control.components.options_panel import PaginationSettings
from pagination_control.components.page_buttons import slot_key, slot_label
from pagination_control.components.table import page_caption
from pagination_control.config import ELLIPSIS
from pagination_control.services.page_window import EllipsisOptions


class TestSlotLabel:

    def test_page_is_one_based(self):
        assert slot_label(0) == "1"
        assert slot_label(19) == "20"

    def test_ellipsis(self):
        assert slot_label(ELLIPSIS) == ELLIPSIS

    def test_whole_float_page(self):
        assert slot_label(4.0) == "5"


class TestSlotKey:

    def test_keys_by_position(self):
        assert slot_key("pager", 3) == "pager_slot_3"
        assert slot_key("pager", 3) != slot_key("pager", 4)


class TestPageCaption:

    def test_full_page(self):
        assert page_caption(1, 25, 500) == "Rows 26-50 of 500"

    def test_partial_last_page(self):
        assert page_caption(2, 25, 55) == "Rows 51-55 of 55"

    def test_no_rows(self):
        assert page_caption(0, 25, 0) == "Rows 0 of 0"


class TestPaginationSettings:

    def test_signature_ignores_row_count_and_page_size(self):
        first = PaginationSettings(100, 25, 7, EllipsisOptions())
        second = PaginationSettings(900, 50, 7, EllipsisOptions())
        assert first.calculator_signature() == second.calculator_signature()

    def test_signature_tracks_display_options(self):
        first = PaginationSettings(100, 25, 7, EllipsisOptions())
        second = PaginationSettings(100, 25, 7, EllipsisOptions(enable_first_last=False))
        third = PaginationSettings(100, 25, 5, EllipsisOptions())
        assert first.calculator_signature() != second.calculator_signature()
        assert first.calculator_signature() != third.calculator_signature()
