"""Page-number window calculation with a Streamlit explorer."""

from pagination_control.config import ELLIPSIS
from pagination_control.services.page_window import EllipsisOptions, PageWindowCalculator, WindowSlot

__all__ = ["ELLIPSIS", "EllipsisOptions", "PageWindowCalculator", "WindowSlot"]
