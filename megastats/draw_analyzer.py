"""
MegaStats Draw Analyzer
=======================
Structural metrics for a single 6-number combination on the 1-60 grid.

The grid is laid out as 6 rows (1-10, 11-20, ..., 51-60) by 10 columns
(numbers grouped by their last digit). Metrics:
- Sum, even/odd counts
- Prime and Fibonacci membership counts
- Empty rows and empty columns
- Quadrant counts and the quadrant signature (e.g. "3-2-1-0")
"""

from typing import Dict, Iterable, Tuple

from loguru import logger

from megastats.models import DerivedMetrics, DrawRecord, validate_numbers


PRIMES = frozenset({2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59})
FIBONACCI = frozenset({1, 2, 3, 5, 8, 13, 21, 34, 55})

ROW_BANDS = 6
COLUMN_BANDS = 10


def row_of(n: int) -> int:
    """Row band 1-6, i.e. ceil(n / 10)."""
    return (n + 9) // 10


def column_of(n: int) -> int:
    """Column band 0-9 by last digit; 0 holds 10, 20, ..., 60."""
    return n % 10


def quadrant_of(n: int) -> int:
    """
    Quadrant 1-4 of a number.

    Upper half is 1-30. Within a decade, last digits 1-5 fall on the left
    (Q1 upper, Q3 lower) and 6-9 plus multiples of 10 on the right
    (Q2 upper, Q4 lower).
    """
    upper = n <= 30
    digit = n % 10
    if digit == 0:
        return 2 if upper else 4
    if 1 <= digit <= 5:
        return 1 if upper else 3
    return 2 if upper else 4


def quadrant_signature(counts: Iterable[int]) -> str:
    """Counts sorted descending and joined with '-'; quadrant identity is dropped."""
    return "-".join(str(c) for c in sorted(counts, reverse=True))


class DrawAnalyzer:
    """
    Compute DerivedMetrics for a 6-number combination.

    Pure: the same numbers always produce the same metrics.
    """

    def analyze(self, numbers: Iterable[int]) -> DerivedMetrics:
        """
        Analyze a combination of 6 distinct numbers in 1-60.

        Raises:
            InvalidDrawError: If the combination is malformed
        """
        values = validate_numbers(numbers)

        even_count = sum(1 for n in values if n % 2 == 0)

        quadrant_counts = [0, 0, 0, 0]
        for n in values:
            quadrant_counts[quadrant_of(n) - 1] += 1

        rows = {row_of(n) for n in values}
        columns = {column_of(n) for n in values}

        return DerivedMetrics(
            total=sum(values),
            even_count=even_count,
            odd_count=len(values) - even_count,
            prime_count=sum(1 for n in values if n in PRIMES),
            fibonacci_count=sum(1 for n in values if n in FIBONACCI),
            empty_rows=ROW_BANDS - len(rows),
            empty_columns=COLUMN_BANDS - len(columns),
            quadrant_counts=tuple(quadrant_counts),
            quadrant_signature=quadrant_signature(quadrant_counts),
        )

    def analyze_draw(self, draw: DrawRecord) -> DerivedMetrics:
        return self.analyze(draw.numbers)


class CachedDrawAnalyzer:
    """
    Memoizing layer over DrawAnalyzer keyed by draw identity (contest + numbers).

    Only an optimization: results are identical to the wrapped analyzer.
    """

    def __init__(self, analyzer: DrawAnalyzer = None):
        self.analyzer = analyzer or DrawAnalyzer()
        self._cache: Dict[Tuple[int, Tuple[int, ...]], DerivedMetrics] = {}

    def analyze_draw(self, draw: DrawRecord) -> DerivedMetrics:
        key = (draw.contest, draw.numbers)
        metrics = self._cache.get(key)
        if metrics is None:
            metrics = self.analyzer.analyze(draw.numbers)
            self._cache[key] = metrics
        return metrics

    def analyze(self, numbers: Iterable[int]) -> DerivedMetrics:
        return self.analyzer.analyze(numbers)

    def clear(self):
        logger.debug(f"Clearing metrics cache ({len(self._cache)} entries)")
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)
