"""Application configuration constants."""

import os
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent
DATA_DIR = ROOT_DIR / "data"
ASSETS_DIR = ROOT_DIR / "assets"

ROWS_FILE = DATA_DIR / "rows.csv"

SERVICE_NAME = "pagination-control"
LOG_LEVEL = os.getenv("PAGINATION_LOG_LEVEL", "INFO")

ELLIPSIS = "..."

DEFAULT_MAX_PAGES_SHOWN = 7
MAX_PAGES_SHOWN_OPTIONS = [3, 5, 7, 9, 11]

DEFAULT_PAGE_SIZE = 25
PAGE_SIZE_OPTIONS = [10, 25, 50, 100]

DEFAULT_SAMPLE_ROWS = 500
MAX_SAMPLE_ROWS = 100_000

REGIONS = ["EMEA", "AMER", "APAC"]

SAMPLE_COLUMNS = [
    "row_id",
    "title",
    "region",
    "score",
]

ELLIPSIS_OPTION_LABELS = {
    "enable_ellipsis": "Enable ellipsis",
    "ellipsis_counts_as_page": "Ellipsis counts as a page",
    "show_ellipsis_if_only_one_page": "Show a lone hidden page as its number",
    "enable_ellipsis_click": "Jump halfway on ellipsis click",
    "enable_first_last": "Pin first and last page",
}
