"""
Tests for loader.py module

Focus: JSON dataset loading, invalid record handling and subset selection.
"""

import json
from datetime import date

import pytest

from megastats.loader import DataLoader, draws_to_dataframe, parse_draws, select_draws


RAW_DRAWS = [
    {"concurso": 1, "data": "2023-12-31", "dezenas": ["05", "11", "22", "33", "44", "50"], "tipo": "VIRADA"},
    {"concurso": 3, "data": "2024-01-07", "dezenas": ["01", "02", "03", "04", "05", "06"], "tipo": "NORMAL"},
    {"concurso": 2, "data": "2024-01-03", "dezenas": ["10", "20", "30", "40", "50", "60"], "tipo": "NORMAL"},
    {"concurso": 4, "data": "2024-01-10", "dezenas": ["04", "10", "23", "31", "42", "55"], "tipo": "VIRADA"},
]


@pytest.fixture
def draws_file(tmp_path):
    path = tmp_path / "draws.json"
    path.write_text(json.dumps(RAW_DRAWS), encoding="utf-8")
    return path


class TestDataLoader:

    def test_loads_newest_first(self, draws_file):
        draws = DataLoader(str(draws_file)).load_draws()

        assert [d.contest for d in draws] == [4, 3, 2, 1]
        assert draws[0].numbers == (4, 10, 23, 31, 42, 55)

    def test_invalid_records_are_skipped(self, tmp_path):
        raw = RAW_DRAWS + [
            {"concurso": 5, "data": "2024-01-14", "dezenas": ["01", "01", "02", "03", "04", "05"]},
            {"concurso": 6, "data": "2024-01-17", "dezenas": ["01", "02", "03"]},
            {"concurso": 7, "dezenas": ["01", "02", "03", "04", "05", "06"]},
            "not a draw",
        ]
        path = tmp_path / "draws.json"
        path.write_text(json.dumps(raw), encoding="utf-8")

        draws = DataLoader(str(path)).load_draws()
        assert [d.contest for d in draws] == [4, 3, 2, 1]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            DataLoader(str(tmp_path / "missing.json")).load_draws()

    def test_non_array_payload(self, tmp_path):
        path = tmp_path / "draws.json"
        path.write_text(json.dumps({"draws": RAW_DRAWS}), encoding="utf-8")

        with pytest.raises(ValueError):
            DataLoader(str(path)).load_draws()

    def test_empty_array(self, tmp_path):
        path = tmp_path / "draws.json"
        path.write_text("[]", encoding="utf-8")

        assert DataLoader(str(path)).load_draws() == []


class TestSelectDraws:

    def test_no_filters_keeps_everything(self, sample_history):
        assert select_draws(sample_history) == sample_history

    def test_special_only(self, sample_history):
        selected = select_draws(sample_history, special_only=True)
        assert [d.contest for d in selected] == [4, 1]

    def test_year(self, sample_history):
        selected = select_draws(sample_history, year=2024)
        assert [d.contest for d in selected] == [4, 3, 2]

    def test_combined_filters(self, sample_history):
        selected = select_draws(sample_history, special_only=True, year=2023)
        assert [d.contest for d in selected] == [1]

    def test_no_match(self, sample_history):
        assert select_draws(sample_history, year=1999) == []


class TestDataFrame:

    def test_draws_to_dataframe(self):
        frame = draws_to_dataframe(parse_draws(RAW_DRAWS))

        assert list(frame.columns) == ['contest', 'draw_date', 'n1', 'n2', 'n3', 'n4', 'n5', 'n6', 'category']
        assert len(frame) == 4
        assert frame.iloc[0]['contest'] == 4
        assert frame.iloc[0]['draw_date'].date() == date(2024, 1, 10)
        assert list(frame.iloc[1][['n1', 'n2', 'n3', 'n4', 'n5', 'n6']]) == [1, 2, 3, 4, 5, 6]

    def test_empty_dataframe_has_columns(self):
        frame = draws_to_dataframe([])
        assert frame.empty
        assert 'n6' in frame.columns
