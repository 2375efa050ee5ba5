"""Unit tests for the row sources."""

from __future__ import annotations

import pandas as pd
import pytest

from pagination_control.config import SAMPLE_COLUMNS
from pagination_control.services import data_loader


class TestBuildSampleRows:

    def test_shape_and_columns(self):
        rows = data_loader.build_sample_rows(120)
        assert list(rows.columns) == SAMPLE_COLUMNS
        assert len(rows) == 120
        assert rows["row_id"].tolist()[:3] == [1, 2, 3]

    def test_deterministic(self):
        pd.testing.assert_frame_equal(
            data_loader.build_sample_rows(30),
            data_loader.build_sample_rows(30),
        )

    def test_zero_rows(self):
        rows = data_loader.build_sample_rows(0)
        assert rows.empty
        assert list(rows.columns) == SAMPLE_COLUMNS


class TestLoadRows:

    def test_reads_values_as_text(self, tmp_path):
        rows_file = tmp_path / "rows.csv"
        rows_file.write_text("row_id,title\n1,First\n2,\n", encoding="utf-8")
        rows = data_loader.load_rows(rows_file)
        assert rows["row_id"].tolist() == ["1", "2"]
        assert rows["title"].tolist() == ["First", ""]

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            data_loader.load_rows(tmp_path / "absent.csv")


class TestGetPage:

    def test_middle_page(self):
        rows = data_loader.build_sample_rows(100)
        page = data_loader.get_page(rows, 2, 25)
        assert page["row_id"].tolist() == list(range(51, 76))

    def test_last_partial_page(self):
        rows = data_loader.build_sample_rows(55)
        page = data_loader.get_page(rows, 2, 25)
        assert page["row_id"].tolist() == list(range(51, 56))

    def test_index_past_end_returns_last_page(self):
        rows = data_loader.build_sample_rows(55)
        page = data_loader.get_page(rows, 9, 25)
        assert page["row_id"].tolist() == list(range(51, 56))
