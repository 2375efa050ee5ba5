"""Page-number button row component."""

from __future__ import annotations

from typing import List, Optional, Tuple

import streamlit as st

from pagination_control.config import ELLIPSIS
from pagination_control.services.page_window import WindowSlot, is_ellipsis


def slot_label(slot: WindowSlot) -> str:
    """Return the button label for a slot: 1-based page number or the marker."""
    if is_ellipsis(slot):
        return ELLIPSIS
    return str(int(slot) + 1)


def slot_key(key_prefix: str, button_index: int) -> str:
    """Return a widget key unique to the slot position."""
    return f"{key_prefix}_slot_{button_index}"


def render_page_buttons(
    window: List[WindowSlot],
    current_page: int,
    key_prefix: str = "pager",
) -> Optional[Tuple[int, WindowSlot]]:
    """Render one button per slot and return ``(button_index, slot)`` of the click."""
    clicked: Optional[Tuple[int, WindowSlot]] = None
    columns = st.columns(len(window))

    for button_index, slot in enumerate(window):
        with columns[button_index]:
            is_current = not is_ellipsis(slot) and slot == current_page
            pressed = st.button(
                slot_label(slot),
                key=slot_key(key_prefix, button_index),
                type="primary" if is_current else "secondary",
                disabled=is_current,
                width="stretch",
            )
            if pressed:
                clicked = (button_index, slot)

    return clicked
