import os
import sys
from datetime import date

import pytest

# Ensure repository root is on sys.path so `import megastats.*` works during tests
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from megastats.models import DrawCategory, DrawRecord, NumberStat


GOOD_BET = [4, 10, 23, 31, 42, 55]
BAD_BET = [1, 2, 3, 4, 5, 6]


@pytest.fixture
def make_draw():
    """Factory for DrawRecords with sensible defaults"""
    def _make(numbers, contest=1, draw_date=date(2024, 1, 1), category=DrawCategory.ORDINARY):
        return DrawRecord(contest=contest, draw_date=draw_date, numbers=numbers, category=category)
    return _make


@pytest.fixture
def sample_history():
    """
    Four draws, newest first.

    Sums: 165, 21, 210, 165. Signatures: 3-2-1-0, 5-1-0-0, 3-3-0-0, 3-2-1-0.
    """
    return [
        DrawRecord(4, date(2024, 1, 10), GOOD_BET, DrawCategory.SPECIAL),
        DrawRecord(3, date(2024, 1, 7), BAD_BET),
        DrawRecord(2, date(2024, 1, 3), [10, 20, 30, 40, 50, 60]),
        DrawRecord(1, date(2023, 12, 31), [5, 11, 22, 33, 44, 50], DrawCategory.SPECIAL),
    ]


@pytest.fixture
def neutral_stats():
    """Hot/cold state where no number is hot or cold"""
    return [NumberStat(number=n, recent_frequency=0, lag=0) for n in range(1, 61)]
