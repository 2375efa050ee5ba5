"""Row sources for the paginated table."""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from pagination_control.config import REGIONS, SAMPLE_COLUMNS
from pagination_control.utils.pagination import clamp_page_index, compute_total_pages, page_slice


def build_sample_rows(row_count: int) -> pd.DataFrame:
    """Build deterministic synthetic rows for the demo table."""
    row_count = max(int(row_count), 0)
    row_ids = range(1, row_count + 1)
    return pd.DataFrame(
        {
            "row_id": list(row_ids),
            "title": [f"Item {row_id:05d}" for row_id in row_ids],
            "region": [REGIONS[row_id % len(REGIONS)] for row_id in row_ids],
            "score": [(row_id * 37) % 101 for row_id in row_ids],
        },
        columns=SAMPLE_COLUMNS,
    )


def load_rows(rows_file: Path) -> pd.DataFrame:
    """Load table rows from CSV, keeping every value as text."""
    if not rows_file.exists():
        raise FileNotFoundError(f"Missing required file: {rows_file}")

    return pd.read_csv(rows_file, dtype=str).fillna("")


def get_page(dataframe: pd.DataFrame, page_index: int, page_size: int) -> pd.DataFrame:
    """Return the rows of one zero-based page, clamping the index into range."""
    total_pages = compute_total_pages(len(dataframe), page_size)
    start, end = page_slice(clamp_page_index(page_index, total_pages), page_size)
    return dataframe.iloc[start:end]
