"""
MegaStats Bet Scorer
====================
Score a candidate 6-number bet (0-100 scale) against fixed structural bands
and the current hot/cold state.

Each factor is classified safe / warning / risk:
- Sum: +-1 sigma / +-2 sigma bands around the theoretical mean 183 (sigma ~ 40)
- Parity, empty rows, empty columns, empty quadrants
- Prime and Fibonacci counts
- Hot/cold exposure

Score = 100 * sum(points * weight) / sum(weight), where safe = 1.0,
warning = 0.5 and risk = 0.0.
"""

import math
from typing import Dict, Iterable, List, Sequence, Tuple

from loguru import logger

from megastats.draw_analyzer import DrawAnalyzer
from megastats.exceptions import IncompleteBetError, InvalidDrawError
from megastats.hot_cold import HotColdTracker, Temperature
from megastats.models import (
    BetEvaluation,
    DerivedMetrics,
    FactorStatus,
    NumberStat,
    MIN_NUMBER,
    MAX_NUMBER,
    NUMBERS_PER_DRAW,
)


FACTOR_WEIGHTS: Dict[str, float] = {
    'sum': 2.0,
    'parity': 2.0,
    'rows': 1.5,
    'columns': 1.5,
    'quadrants': 1.5,
    'primes': 1.0,
    'fibonacci': 1.0,
    'hot_cold': 1.5,
}


def collect_bet_numbers(bet: Iterable) -> Tuple[int, ...]:
    """
    Keep the distinct integers in 1-60 from a possibly partial bet.

    Raises:
        IncompleteBetError: Fewer than 6 valid numbers
        InvalidDrawError: More than 6 valid numbers
    """
    valid = set()
    for n in bet or ():
        if isinstance(n, bool) or not isinstance(n, int):
            continue
        if MIN_NUMBER <= n <= MAX_NUMBER:
            valid.add(n)

    if len(valid) < NUMBERS_PER_DRAW:
        raise IncompleteBetError(
            f"Bet has {len(valid)} valid numbers, {NUMBERS_PER_DRAW} are needed for an evaluation"
        )
    if len(valid) > NUMBERS_PER_DRAW:
        raise InvalidDrawError(f"A bet must have exactly {NUMBERS_PER_DRAW} numbers, got {len(valid)}")
    return tuple(sorted(valid))


class BetScorer:
    """
    Evaluate bets factor by factor and combine them into a weighted score.
    """

    SUM_SAFE = (143, 223)
    SUM_WARNING_LOW = (103, 142)
    SUM_WARNING_HIGH = (224, 263)
    PARITY_SAFE = (2, 4)
    EMPTY_ROWS_SAFE = (1, 2)
    EMPTY_COLUMNS_SAFE = (4, 5)

    def __init__(self, tracker: HotColdTracker = None, analyzer: DrawAnalyzer = None):
        self.tracker = tracker or HotColdTracker()
        self.analyzer = analyzer or DrawAnalyzer()
        self.weights = dict(FACTOR_WEIGHTS)

    def score(self, bet: Iterable, hot_cold: Sequence[NumberStat]) -> BetEvaluation:
        """
        Evaluate a bet.

        Args:
            bet: Candidate numbers (entries that are not ints in 1-60 are ignored)
            hot_cold: 60 NumberStat from HotColdTracker.track()

        Returns:
            BetEvaluation with per-factor statuses and a 0-100 score

        Raises:
            IncompleteBetError: Fewer than 6 valid distinct numbers
            InvalidDrawError: More than 6 valid distinct numbers
            ValueError: hot_cold does not describe numbers 1-60
        """
        numbers = collect_bet_numbers(bet)
        stats = self._index_stats(hot_cold)
        metrics = self.analyzer.analyze(numbers)

        hot, cold = [], []
        for n in numbers:
            temperature = self.tracker.classify(stats[n])
            if temperature is Temperature.HOT:
                hot.append(n)
            elif temperature is Temperature.COLD:
                cold.append(n)

        statuses = {
            'sum': self.classify_sum(metrics.total),
            'parity': self.classify_parity(metrics.even_count),
            'rows': self.classify_empty_rows(metrics.empty_rows),
            'columns': self.classify_empty_columns(metrics.empty_columns),
            'quadrants': self.classify_quadrants(metrics.empty_quadrants),
            'primes': self.classify_primes(metrics.prime_count),
            'fibonacci': self.classify_fibonacci(metrics.fibonacci_count),
            'hot_cold': self.classify_hot_cold(len(hot), len(cold)),
        }
        score = self._weighted_score(statuses)

        evaluation = BetEvaluation(
            numbers=numbers,
            metrics=metrics,
            statuses=statuses,
            score=score,
            hot_numbers=hot,
            cold_numbers=cold,
            recommendation=self._generate_recommendation(score, metrics, statuses, hot, cold),
        )
        logger.debug(f"Bet {list(numbers)} scored {score}")
        return evaluation

    def _index_stats(self, hot_cold: Sequence[NumberStat]) -> Dict[int, NumberStat]:
        stats = {stat.number: stat for stat in hot_cold}
        if len(stats) != MAX_NUMBER or set(stats) != set(range(MIN_NUMBER, MAX_NUMBER + 1)):
            raise ValueError(f"hot_cold must hold one NumberStat per number 1-{MAX_NUMBER}")
        return stats

    def _weighted_score(self, statuses: Dict[str, FactorStatus]) -> int:
        earned = sum(statuses[name].points * weight for name, weight in self.weights.items())
        raw = 100.0 * earned / sum(self.weights.values())
        # half-up rounding
        return int(math.floor(raw + 0.5))

    def classify_sum(self, total: int) -> FactorStatus:
        if self.SUM_SAFE[0] <= total <= self.SUM_SAFE[1]:
            return FactorStatus.SAFE
        if self.SUM_WARNING_LOW[0] <= total <= self.SUM_WARNING_LOW[1]:
            return FactorStatus.WARNING
        if self.SUM_WARNING_HIGH[0] <= total <= self.SUM_WARNING_HIGH[1]:
            return FactorStatus.WARNING
        return FactorStatus.RISK

    def classify_parity(self, even_count: int) -> FactorStatus:
        if self.PARITY_SAFE[0] <= even_count <= self.PARITY_SAFE[1]:
            return FactorStatus.SAFE
        return FactorStatus.RISK

    def classify_empty_rows(self, empty_rows: int) -> FactorStatus:
        if self.EMPTY_ROWS_SAFE[0] <= empty_rows <= self.EMPTY_ROWS_SAFE[1]:
            return FactorStatus.SAFE
        return FactorStatus.WARNING

    def classify_empty_columns(self, empty_columns: int) -> FactorStatus:
        if self.EMPTY_COLUMNS_SAFE[0] <= empty_columns <= self.EMPTY_COLUMNS_SAFE[1]:
            return FactorStatus.SAFE
        return FactorStatus.WARNING

    def classify_quadrants(self, empty_quadrants: int) -> FactorStatus:
        """0 empty ("2-2-1-1" style) and 1 empty ("3-2-1-0" style) are both safe."""
        if empty_quadrants <= 1:
            return FactorStatus.SAFE
        return FactorStatus.RISK

    def classify_primes(self, prime_count: int) -> FactorStatus:
        if prime_count <= 2:
            return FactorStatus.SAFE
        if prime_count == 3:
            return FactorStatus.WARNING
        return FactorStatus.RISK

    def classify_fibonacci(self, fibonacci_count: int) -> FactorStatus:
        if fibonacci_count <= 1:
            return FactorStatus.SAFE
        if fibonacci_count == 2:
            return FactorStatus.WARNING
        return FactorStatus.RISK

    def classify_hot_cold(self, hot_count: int, cold_count: int) -> FactorStatus:
        if hot_count <= 1 and cold_count <= 1:
            return FactorStatus.SAFE
        return FactorStatus.WARNING

    def _generate_recommendation(
        self,
        score: int,
        metrics: DerivedMetrics,
        statuses: Dict[str, FactorStatus],
        hot: List[int],
        cold: List[int]
    ) -> str:
        """
        Generate actionable recommendation based on factor statuses.

        Returns:
            String with improvement suggestions
        """
        recommendations = []

        if score >= 80:
            recommendations.append("Well balanced bet, in line with the historical baseline.")
        elif score >= 60:
            recommendations.append("Reasonable bet with a few weak spots.")
        else:
            recommendations.append("This bet deviates from the historical baseline in several ways.")

        if statuses['sum'] is not FactorStatus.SAFE:
            recommendations.append(
                f"SUM: Target a sum between {self.SUM_SAFE[0]}-{self.SUM_SAFE[1]} (current: {metrics.total})."
            )
        if statuses['parity'] is not FactorStatus.SAFE:
            recommendations.append(
                f"PARITY: Aim for 2-4 even numbers (current: {metrics.even_count} even, {metrics.odd_count} odd)."
            )
        if statuses['rows'] is not FactorStatus.SAFE:
            recommendations.append(f"ROWS: Leave 1-2 rows empty (current: {metrics.empty_rows}).")
        if statuses['columns'] is not FactorStatus.SAFE:
            recommendations.append(f"COLUMNS: Leave 4-5 columns empty (current: {metrics.empty_columns}).")
        if statuses['quadrants'] is not FactorStatus.SAFE:
            recommendations.append(
                f"QUADRANTS: Numbers are concentrated in too few quadrants ({metrics.quadrant_signature})."
            )
        if statuses['primes'] is not FactorStatus.SAFE:
            recommendations.append(f"PRIMES: Use at most 2 primes (current: {metrics.prime_count}).")
        if statuses['fibonacci'] is not FactorStatus.SAFE:
            recommendations.append(
                f"FIBONACCI: Use at most 1 Fibonacci number (current: {metrics.fibonacci_count})."
            )
        if statuses['hot_cold'] is not FactorStatus.SAFE:
            recommendations.append(
                f"HOT/COLD: Avoid stacking hot or overdue numbers (hot: {hot}, cold: {cold})."
            )

        return " ".join(recommendations)
