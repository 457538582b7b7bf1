"""
MegaStats Exceptions
====================
Recoverable error conditions raised by the analysis engine.
"""


class MegaStatsError(Exception):
    """Base exception for all analysis engine errors."""
    pass


class InvalidDrawError(MegaStatsError, ValueError):
    """A draw or bet does not hold exactly 6 distinct numbers in 1-60."""
    pass


class EmptyDatasetError(MegaStatsError):
    """Aggregation was requested over zero draws."""
    pass


class IncompleteBetError(MegaStatsError):
    """Fewer than 6 valid numbers were supplied for a bet."""
    pass


class HistoryOrderError(MegaStatsError, ValueError):
    """Draw history is not ordered newest first."""
    pass
