"""
MegaStats Historical Aggregator
===============================
Frequency distributions of draw metrics across a historical subset.

Continuous metrics (sum) are bucketed by flooring to multiples of 10;
discrete metrics use their raw value. Percentages are relative to the
number of draws in the subset.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Union

import numpy as np
import pandas as pd
from loguru import logger

from megastats.draw_analyzer import CachedDrawAnalyzer
from megastats.exceptions import EmptyDatasetError
from megastats.models import DrawRecord, MAX_NUMBER


SUM_BUCKET_WIDTH = 10
DEFAULT_TOP_SIGNATURES = 5


class Metric(str, Enum):
    """Metrics available for distribution analysis."""
    SUM = "sum"
    EVEN_COUNT = "even_count"
    ODD_COUNT = "odd_count"
    PRIME_COUNT = "prime_count"
    FIBONACCI_COUNT = "fibonacci_count"
    EMPTY_ROWS = "empty_rows"
    EMPTY_COLUMNS = "empty_columns"
    QUADRANT_SIGNATURE = "quadrant_signature"

    @property
    def column(self) -> str:
        """Column holding this metric in the metrics frame"""
        return "total" if self is Metric.SUM else self.value

    @property
    def is_numeric(self) -> bool:
        return self is not Metric.QUADRANT_SIGNATURE


@dataclass(frozen=True)
class DistributionBucket:
    """One bucket of a metric distribution."""
    key: Union[int, str]
    count: int
    percent: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class DatasetSummary:
    """Headline figures for a draw subset"""
    total_draws: int
    average_sum: int
    top_number: Optional[int]
    top_number_count: int

    @classmethod
    def empty(cls) -> "DatasetSummary":
        """Neutral result for callers that hit an empty subset."""
        return cls(total_draws=0, average_sum=0, top_number=None, top_number_count=0)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class HistoricalAggregator:
    """
    Aggregate per-draw metrics into distributions.

    Metrics are computed through a CachedDrawAnalyzer, so aggregating several
    metrics over the same draws analyzes each draw once.
    """

    def __init__(self, analyzer: CachedDrawAnalyzer = None, top_signatures: int = DEFAULT_TOP_SIGNATURES):
        self.analyzer = analyzer or CachedDrawAnalyzer()
        self.top_signatures = top_signatures
        logger.info(f"HistoricalAggregator initialized (top_signatures={top_signatures})")

    def metrics_frame(self, draws: Sequence[DrawRecord]) -> pd.DataFrame:
        """
        Build a DataFrame with one row of derived metrics per draw.

        Columns: contest, draw_date, category, total, even_count, odd_count,
        prime_count, fibonacci_count, empty_rows, empty_columns,
        quadrant_signature
        """
        rows = []
        for draw in draws:
            metrics = self.analyzer.analyze_draw(draw)
            rows.append({
                'contest': draw.contest,
                'draw_date': draw.draw_date,
                'category': draw.category.value,
                'total': metrics.total,
                'even_count': metrics.even_count,
                'odd_count': metrics.odd_count,
                'prime_count': metrics.prime_count,
                'fibonacci_count': metrics.fibonacci_count,
                'empty_rows': metrics.empty_rows,
                'empty_columns': metrics.empty_columns,
                'quadrant_signature': metrics.quadrant_signature,
            })
        return pd.DataFrame(rows)

    def aggregate(
        self,
        draws: Sequence[DrawRecord],
        metric: Union[Metric, str],
        top_n: Optional[int] = None
    ) -> List[DistributionBucket]:
        """
        Distribution of a metric over the given draws.

        Args:
            draws: Draw subset (order does not matter)
            metric: Metric or its string name
            top_n: Number of quadrant signatures to keep (defaults to
                top_signatures; 0 keeps all). Ignored for numeric metrics.

        Returns:
            Buckets sorted ascending by key for numeric metrics, by
            descending count for quadrant signatures

        Raises:
            EmptyDatasetError: If draws is empty
            ValueError: If metric is unknown
        """
        metric = Metric(metric)
        if not draws:
            raise EmptyDatasetError(f"Cannot aggregate '{metric.value}' over an empty draw list")

        frame = self.metrics_frame(draws)
        values = frame[metric.column]
        if metric is Metric.SUM:
            values = (values // SUM_BUCKET_WIDTH) * SUM_BUCKET_WIDTH

        total = len(frame)
        counts = values.value_counts()

        buckets = [
            DistributionBucket(
                key=int(key) if metric.is_numeric else str(key),
                count=int(count),
                percent=round(100.0 * int(count) / total, 1),
            )
            for key, count in counts.items()
        ]

        if metric.is_numeric:
            buckets.sort(key=lambda b: b.key)
        else:
            buckets.sort(key=lambda b: (-b.count, b.key))
            limit = self.top_signatures if top_n is None else top_n
            if limit > 0:
                buckets = buckets[:limit]

        logger.debug(f"Aggregated '{metric.value}' over {total} draws into {len(buckets)} buckets")
        return buckets

    def distributions(self, draws: Sequence[DrawRecord]) -> Dict[str, List[DistributionBucket]]:
        """All metric distributions for a subset, keyed by metric name."""
        return {metric.value: self.aggregate(draws, metric) for metric in Metric}

    def parity_totals(self, draws: Sequence[DrawRecord]) -> Dict[str, int]:
        """Total even and odd numbers drawn across the subset."""
        if not draws:
            raise EmptyDatasetError("Cannot compute parity totals over an empty draw list")

        frame = self.metrics_frame(draws)
        return {
            'even': int(frame['even_count'].sum()),
            'odd': int(frame['odd_count'].sum()),
        }

    def summary(self, draws: Sequence[DrawRecord]) -> DatasetSummary:
        """
        Headline figures: draw count, average sum and most frequent number.

        Ties for the most frequent number go to the smaller number.
        """
        if not draws:
            raise EmptyDatasetError("Cannot summarize an empty draw list")

        frame = self.metrics_frame(draws)
        average = float(frame['total'].mean())

        occurrences = np.bincount(
            np.array([n for draw in draws for n in draw.numbers]),
            minlength=MAX_NUMBER + 1
        )
        top_number = int(np.argmax(occurrences))

        summary = DatasetSummary(
            total_draws=len(frame),
            average_sum=int(np.floor(average + 0.5)),
            top_number=top_number,
            top_number_count=int(occurrences[top_number]),
        )
        logger.debug(f"Summary computed: {summary}")
        return summary
