"""
MegaStats - Mega-Sena Draw Analysis Engine
==========================================

- Per-draw structural metrics (DrawAnalyzer)
- Historical metric distributions (HistoricalAggregator)
- Hot/cold number tracking (HotColdTracker)
- Bet quality scoring (BetScorer)
"""

__version__ = "1.0.0"

from .exceptions import (
    MegaStatsError,
    InvalidDrawError,
    EmptyDatasetError,
    IncompleteBetError,
    HistoryOrderError
)

from .models import (
    DrawCategory,
    DrawRecord,
    DerivedMetrics,
    NumberStat,
    BetEvaluation,
    FactorStatus
)

from .draw_analyzer import DrawAnalyzer, CachedDrawAnalyzer
from .aggregator import HistoricalAggregator, Metric, DistributionBucket, DatasetSummary
from .hot_cold import HotColdTracker, Temperature, newest_first
from .bet_scorer import BetScorer

__all__ = [
    # Errors
    'MegaStatsError',
    'InvalidDrawError',
    'EmptyDatasetError',
    'IncompleteBetError',
    'HistoryOrderError',

    # Models
    'DrawCategory',
    'DrawRecord',
    'DerivedMetrics',
    'NumberStat',
    'BetEvaluation',
    'FactorStatus',

    # Engine
    'DrawAnalyzer',
    'CachedDrawAnalyzer',
    'HistoricalAggregator',
    'Metric',
    'DistributionBucket',
    'DatasetSummary',
    'HotColdTracker',
    'Temperature',
    'newest_first',
    'BetScorer',
]
