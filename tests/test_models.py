"""
Tests for DrawRecord and related models
"""

from dataclasses import FrozenInstanceError
from datetime import date, datetime

import pytest

from megastats.exceptions import InvalidDrawError
from megastats.models import DrawCategory, DrawRecord, FactorStatus, NumberStat


class TestDrawRecord:

    def test_numbers_are_sorted_tuple(self):
        draw = DrawRecord(10, date(2024, 5, 4), [42, 4, 55, 10, 31, 23])
        assert draw.numbers == (4, 10, 23, 31, 42, 55)

    def test_iso_date_string_is_parsed(self):
        draw = DrawRecord(10, "2024-05-04", [1, 2, 3, 4, 5, 6])
        assert draw.draw_date == date(2024, 5, 4)

    def test_datetime_is_truncated_to_date(self):
        draw = DrawRecord(10, datetime(2024, 5, 4, 20, 0), [1, 2, 3, 4, 5, 6])
        assert draw.draw_date == date(2024, 5, 4)

    def test_default_category_is_ordinary(self):
        draw = DrawRecord(10, date(2024, 5, 4), [1, 2, 3, 4, 5, 6])
        assert draw.category is DrawCategory.ORDINARY
        assert draw.is_special is False

    def test_is_immutable(self):
        draw = DrawRecord(10, date(2024, 5, 4), [1, 2, 3, 4, 5, 6])
        with pytest.raises(FrozenInstanceError):
            draw.contest = 11

    @pytest.mark.parametrize("numbers", [[1, 2, 3], [1, 2, 3, 4, 5, 5], [1, 2, 3, 4, 5, 70]])
    def test_invalid_numbers(self, numbers):
        with pytest.raises(InvalidDrawError, match="Contest 10"):
            DrawRecord(10, date(2024, 5, 4), numbers)

    def test_invalid_contest(self):
        with pytest.raises(InvalidDrawError):
            DrawRecord("10", date(2024, 5, 4), [1, 2, 3, 4, 5, 6])

    def test_invalid_date(self):
        with pytest.raises(InvalidDrawError):
            DrawRecord(10, "May 4th", [1, 2, 3, 4, 5, 6])

    def test_to_dict(self):
        draw = DrawRecord(10, date(2024, 5, 4), [1, 2, 3, 4, 5, 6], DrawCategory.SPECIAL)
        assert draw.to_dict() == {
            'contest': 10,
            'date': '2024-05-04',
            'numbers': [1, 2, 3, 4, 5, 6],
            'category': 'special',
        }


class TestFromDict:

    def test_source_dataset_keys(self):
        draw = DrawRecord.from_dict({
            'concurso': 2701,
            'data': '2023-12-31',
            'dezenas': ['21', '24', '33', '41', '48', '56'],
            'tipo': 'VIRADA',
            'analises': {'soma': 223},
        })

        assert draw.contest == 2701
        assert draw.draw_date == date(2023, 12, 31)
        assert draw.numbers == (21, 24, 33, 41, 48, 56)
        assert draw.is_special

    def test_english_keys(self):
        draw = DrawRecord.from_dict({
            'contest': '5',
            'date': '31/12/2023',
            'numbers': [1, 2, 3, 4, 5, 6],
            'category': 'ordinary',
        })

        assert draw.contest == 5
        assert draw.draw_date == date(2023, 12, 31)
        assert draw.category is DrawCategory.ORDINARY

    def test_missing_fields(self):
        with pytest.raises(InvalidDrawError):
            DrawRecord.from_dict({'concurso': 1, 'data': '2024-01-01'})

    def test_non_numeric_strings(self):
        with pytest.raises(InvalidDrawError):
            DrawRecord.from_dict({'concurso': 1, 'data': '2024-01-01', 'dezenas': ['a', 2, 3, 4, 5, 6]})

    @pytest.mark.parametrize("contest", [12.7, 12.0, '12.7', '-3', True])
    def test_non_integer_contest_is_rejected(self, contest):
        with pytest.raises(InvalidDrawError):
            DrawRecord.from_dict({'concurso': contest, 'data': '2024-01-01', 'dezenas': [1, 2, 3, 4, 5, 6]})

    @pytest.mark.parametrize("number", [6.0, 6.5, '6.0', '+6'])
    def test_non_integer_numbers_are_rejected(self, number):
        with pytest.raises(InvalidDrawError):
            DrawRecord.from_dict({'concurso': 1, 'data': '2024-01-01', 'dezenas': [1, 2, 3, 4, 5, number]})


class TestEnums:

    @pytest.mark.parametrize("label,expected", [
        ('VIRADA', DrawCategory.SPECIAL),
        ('special', DrawCategory.SPECIAL),
        ('Especial', DrawCategory.SPECIAL),
        ('NORMAL', DrawCategory.ORDINARY),
        (None, DrawCategory.ORDINARY),
        (DrawCategory.SPECIAL, DrawCategory.SPECIAL),
    ])
    def test_category_parse(self, label, expected):
        assert DrawCategory.parse(label) is expected

    def test_factor_status_values(self):
        assert [s.value for s in FactorStatus] == ['safe', 'warning', 'risk']

    def test_number_stat_to_dict(self):
        assert NumberStat(7, 2, 3).to_dict() == {'number': 7, 'recent_frequency': 2, 'lag': 3}
