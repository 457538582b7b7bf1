"""
MegaStats Hot/Cold Tracker
==========================
Per-number recency state over a draw history ordered newest first.

For every number 1-60:
- recent_frequency: appearances within the newest `window` draws
- lag: draws since last appearance (0 = in the newest draw); a number that
  never appears gets lag == len(draws), i.e. maximally overdue
"""

from enum import Enum
from typing import List, Sequence

import numpy as np
from loguru import logger

from megastats.exceptions import HistoryOrderError
from megastats.models import DrawRecord, NumberStat, MAX_NUMBER


DEFAULT_WINDOW = 20
DEFAULT_HOT_THRESHOLD = 3
DEFAULT_COLD_LAG = 15


class Temperature(str, Enum):
    HOT = "hot"
    COLD = "cold"
    NEUTRAL = "neutral"


def newest_first(draws: Sequence[DrawRecord]) -> List[DrawRecord]:
    """Sort a history newest first by (draw_date, contest)."""
    return sorted(draws, key=lambda d: (d.draw_date, d.contest), reverse=True)


def check_newest_first(draws: Sequence[DrawRecord]):
    """
    Raise HistoryOrderError unless draw dates are non-increasing.

    Reversed input would silently invert every lag value.
    """
    for i in range(1, len(draws)):
        if draws[i].draw_date > draws[i - 1].draw_date:
            raise HistoryOrderError(
                f"Draw history must be newest first: contest {draws[i].contest} "
                f"({draws[i].draw_date}) follows contest {draws[i - 1].contest} "
                f"({draws[i - 1].draw_date})"
            )


class HotColdTracker:
    """
    Short-window frequency and lag tracker.

    Thresholds used by classify():
    - hot: recent_frequency >= hot_threshold
    - cold: lag >= cold_lag (only when not hot)
    """

    def __init__(
        self,
        window: int = DEFAULT_WINDOW,
        hot_threshold: int = DEFAULT_HOT_THRESHOLD,
        cold_lag: int = DEFAULT_COLD_LAG
    ):
        if isinstance(window, bool) or not isinstance(window, int) or window < 1:
            raise ValueError(f"window must be a positive integer, got {window!r}")

        self.window = window
        self.hot_threshold = hot_threshold
        self.cold_lag = cold_lag
        logger.info(f"HotColdTracker initialized (window={window}, hot>={hot_threshold}, cold lag>={cold_lag})")

    def track(self, draws: Sequence[DrawRecord]) -> List[NumberStat]:
        """
        Compute NumberStat for numbers 1-60; index i holds number i + 1.

        Args:
            draws: History with draws[0] the most recent draw

        Raises:
            HistoryOrderError: If the history is not newest first
        """
        check_newest_first(draws)

        total = len(draws)
        if total == 0:
            logger.warning("Empty draw history, every number gets lag 0 and no recent appearances")

        frequency = np.zeros(MAX_NUMBER, dtype=int)
        lags = np.full(MAX_NUMBER, total, dtype=int)
        seen = np.zeros(MAX_NUMBER, dtype=bool)

        for idx, draw in enumerate(draws):
            for num in draw.numbers:
                if idx < self.window:
                    frequency[num - 1] += 1
                if not seen[num - 1]:
                    seen[num - 1] = True
                    lags[num - 1] = idx

        stats = [
            NumberStat(number=i + 1, recent_frequency=int(frequency[i]), lag=int(lags[i]))
            for i in range(MAX_NUMBER)
        ]
        logger.debug(f"Hot/cold tracking complete ({total} draws, {int(seen.sum())} numbers seen)")
        return stats

    def classify(self, stat: NumberStat) -> Temperature:
        """Hot takes precedence over cold."""
        if stat.recent_frequency >= self.hot_threshold:
            return Temperature.HOT
        if stat.lag >= self.cold_lag:
            return Temperature.COLD
        return Temperature.NEUTRAL

    def hot_numbers(self, stats: Sequence[NumberStat]) -> List[int]:
        """Hot numbers, most frequent first"""
        hot = [s for s in stats if self.classify(s) is Temperature.HOT]
        return [s.number for s in sorted(hot, key=lambda s: (-s.recent_frequency, s.number))]

    def cold_numbers(self, stats: Sequence[NumberStat]) -> List[int]:
        """Cold numbers, most overdue first"""
        cold = [s for s in stats if self.classify(s) is Temperature.COLD]
        return [s.number for s in sorted(cold, key=lambda s: (-s.lag, s.number))]
