"""
MegaStats Analytics API
=======================

HTTP surface over the analysis engine for dashboard integration:
- Overview KPIs (draw count, average sum, hottest number, parity totals)
- Metric distributions
- Per-number hot/cold state
- Bet evaluation
"""

from typing import Any, Dict, List, Optional, Union

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field
from loguru import logger

from megastats.aggregator import DatasetSummary, HistoricalAggregator, Metric
from megastats.bet_scorer import BetScorer
from megastats.config import AnalyticsSettings, load_settings
from megastats.exceptions import EmptyDatasetError, IncompleteBetError, InvalidDrawError
from megastats.hot_cold import HotColdTracker
from megastats.loader import DataLoader, select_draws
from megastats.models import DrawRecord


# Pydantic models for response
class ParityTotals(BaseModel):
    even: int = Field(..., description="Even numbers drawn in the subset")
    odd: int = Field(..., description="Odd numbers drawn in the subset")


class OverviewResponse(BaseModel):
    total_draws: int
    average_sum: int
    top_number: Optional[int] = Field(None, description="Most frequent number in the subset")
    top_number_count: int
    parity: ParityTotals


class Bucket(BaseModel):
    key: Union[int, str]
    count: int
    percent: float


class DistributionResponse(BaseModel):
    metric: str
    total_draws: int
    buckets: List[Bucket]


class NumberState(BaseModel):
    number: int
    recent_frequency: int
    lag: int
    temperature: str


class HotColdResponse(BaseModel):
    total_draws: int
    window: int
    numbers: List[NumberState]
    hot_numbers: List[int]
    cold_numbers: List[int]


class BetRequest(BaseModel):
    # entries are passed to the scorer unconverted; non-integers are ignored there
    numbers: List[Any] = Field(..., description="Candidate bet, possibly partial")
    special_only: bool = False
    year: Optional[int] = None
    window: Optional[int] = Field(None, ge=1)


class BetScoreResponse(BaseModel):
    evaluable: bool
    score: Optional[int] = None
    statuses: Dict[str, str] = Field(default_factory=dict)
    hot_numbers: List[int] = Field(default_factory=list)
    cold_numbers: List[int] = Field(default_factory=list)
    recommendation: str = ""


analytics_router = APIRouter(prefix="/api/v1/analytics", tags=["Analytics"])


# Session state, loaded lazily on first use
_settings: Optional[AnalyticsSettings] = None
_draws: Optional[List[DrawRecord]] = None
_aggregator: Optional[HistoricalAggregator] = None


def get_settings() -> AnalyticsSettings:
    """Get or load the analytics settings singleton"""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def get_draws() -> List[DrawRecord]:
    """Get the configured draw history, newest first. The dataset is read once per session."""
    global _draws
    if _draws is None:
        settings = get_settings()
        _draws = DataLoader(settings.draws_file).load_draws()
    return _draws


def get_aggregator() -> HistoricalAggregator:
    """Get or create the aggregator singleton, so derived metrics are cached across requests"""
    global _aggregator
    if _aggregator is None:
        _aggregator = HistoricalAggregator(top_signatures=get_settings().top_signatures)
    return _aggregator


def invalidate_analytics_cache() -> None:
    """Drop cached settings, draws and metrics. Call after the dataset file changes."""
    global _settings, _draws, _aggregator
    _settings = None
    _draws = None
    _aggregator = None
    logger.info("Analytics cache invalidated")


def _load_subset(special_only: bool, year: Optional[int]) -> List[DrawRecord]:
    try:
        draws = get_draws()
    except FileNotFoundError as e:
        logger.error(f"Draw dataset unavailable: {e}")
        raise HTTPException(status_code=503, detail="No historical data available for analytics")
    return select_draws(draws, special_only=special_only, year=year)


@analytics_router.get("/overview", response_model=OverviewResponse, summary="Headline figures for a draw subset")
async def get_overview(special_only: bool = False, year: Optional[int] = None) -> OverviewResponse:
    try:
        draws = _load_subset(special_only, year)
        aggregator = get_aggregator()
        try:
            summary = aggregator.summary(draws)
            parity = aggregator.parity_totals(draws)
        except EmptyDatasetError:
            summary = DatasetSummary.empty()
            parity = {'even': 0, 'odd': 0}

        return OverviewResponse(**summary.to_dict(), parity=ParityTotals(**parity))

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Overview generation failed: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to generate overview: {str(e)}")


@analytics_router.get(
    "/distributions/{metric}",
    response_model=DistributionResponse,
    summary="Distribution of a draw metric"
)
async def get_distribution(
    metric: str,
    special_only: bool = False,
    year: Optional[int] = None,
    top_n: Optional[int] = Query(None, ge=0)
) -> DistributionResponse:
    try:
        selected = Metric(metric)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown metric '{metric}'")

    try:
        draws = _load_subset(special_only, year)
        aggregator = get_aggregator()
        try:
            buckets = aggregator.aggregate(draws, selected, top_n=top_n)
        except EmptyDatasetError:
            buckets = []

        return DistributionResponse(
            metric=selected.value,
            total_draws=len(draws),
            buckets=[Bucket(**b.to_dict()) for b in buckets]
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Distribution generation failed for '{metric}': {e}")
        raise HTTPException(status_code=500, detail=f"Failed to generate distribution: {str(e)}")


@analytics_router.get("/hot-cold", response_model=HotColdResponse, summary="Per-number recency state")
async def get_hot_cold(
    special_only: bool = False,
    year: Optional[int] = None,
    window: Optional[int] = Query(None, ge=1)
) -> HotColdResponse:
    try:
        settings = get_settings()
        draws = _load_subset(special_only, year)
        tracker = HotColdTracker(
            window=window or settings.window,
            hot_threshold=settings.hot_threshold,
            cold_lag=settings.cold_lag
        )
        stats = tracker.track(draws)

        return HotColdResponse(
            total_draws=len(draws),
            window=tracker.window,
            numbers=[
                NumberState(**s.to_dict(), temperature=tracker.classify(s).value)
                for s in stats
            ],
            hot_numbers=tracker.hot_numbers(stats),
            cold_numbers=tracker.cold_numbers(stats)
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Hot/cold generation failed: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to generate hot/cold state: {str(e)}")


@analytics_router.post("/score", response_model=BetScoreResponse, summary="Evaluate a candidate bet")
async def score_bet(request: BetRequest) -> BetScoreResponse:
    try:
        settings = get_settings()
        draws = _load_subset(request.special_only, request.year)
        tracker = HotColdTracker(
            window=request.window or settings.window,
            hot_threshold=settings.hot_threshold,
            cold_lag=settings.cold_lag
        )
        scorer = BetScorer(tracker=tracker)
        evaluation = scorer.score(request.numbers, tracker.track(draws))

        return BetScoreResponse(
            evaluable=True,
            score=evaluation.score,
            statuses={name: status.value for name, status in evaluation.statuses.items()},
            hot_numbers=evaluation.hot_numbers,
            cold_numbers=evaluation.cold_numbers,
            recommendation=evaluation.recommendation
        )

    except IncompleteBetError as e:
        logger.debug(f"Bet not evaluable yet: {e}")
        return BetScoreResponse(evaluable=False, recommendation=str(e))
    except InvalidDrawError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Bet scoring failed: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to score bet: {str(e)}")
