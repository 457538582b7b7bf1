#!/usr/bin/env python3
"""
MegaStats Draw Report
=====================

Prints a descriptive report for a draw dataset:
- Headline figures (draw count, average sum, hottest number)
- Every metric distribution
- Hottest and most overdue numbers
- Optional bet evaluation

Usage:
    python scripts/analyze_draws.py
    python scripts/analyze_draws.py --file data/sample_draws.json --special-only
    python scripts/analyze_draws.py --bet 4 10 23 31 42 55
"""

import argparse
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from loguru import logger
from megastats import (
    BetScorer,
    EmptyDatasetError,
    HistoricalAggregator,
    HotColdTracker,
    IncompleteBetError,
    InvalidDrawError,
    Metric,
)
from megastats.config import load_settings
from megastats.loader import DataLoader, select_draws


def print_section(title):
    """Print a formatted section header"""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70 + "\n")


def report_distributions(aggregator, draws):
    print_section("Metric Distributions")
    summary = aggregator.summary(draws)
    parity = aggregator.parity_totals(draws)
    print(f"Draws analyzed: {summary.total_draws}")
    print(f"Average sum:    {summary.average_sum}")
    print(f"Hottest number: #{summary.top_number} ({summary.top_number_count} times)")
    print(f"Even/Odd total: {parity['even']}/{parity['odd']}")

    for metric in Metric:
        print(f"\n{metric.value}")
        print("-" * 70)
        for bucket in aggregator.aggregate(draws, metric):
            bar = "#" * int(bucket.percent // 2)
            print(f"{str(bucket.key):>10} | {bucket.count:5d} | {bucket.percent:5.1f}% {bar}")


def report_hot_cold(tracker, stats):
    print_section("Hot / Cold Numbers")
    print(f"Window: last {tracker.window} draws")
    print(f"Hot:  {tracker.hot_numbers(stats)}")
    print(f"Cold: {tracker.cold_numbers(stats)}")


def report_bet(scorer, bet, stats):
    print_section(f"Bet Evaluation {bet}")
    try:
        evaluation = scorer.score(bet, stats)
    except (IncompleteBetError, InvalidDrawError) as e:
        print(f"Bet cannot be evaluated: {e}")
        return

    for factor, status in evaluation.statuses.items():
        print(f"{factor:>10}: {status.value}")
    print(f"\nScore: {evaluation.score}/100")
    print(evaluation.recommendation)


def main():
    settings = load_settings()

    parser = argparse.ArgumentParser(description="Descriptive report for Mega-Sena draw history")
    parser.add_argument("--file", default=settings.draws_file, help="JSON draws dataset")
    parser.add_argument("--special-only", action="store_true", help="Only special (year-end) draws")
    parser.add_argument("--year", type=int, default=None, help="Only draws from this year")
    parser.add_argument("--window", type=int, default=settings.window, help="Hot/cold window in draws")
    parser.add_argument("--bet", type=int, nargs="+", help="Bet numbers to evaluate")
    args = parser.parse_args()

    logger.info(f"Loading draws from {args.file}...")
    draws = select_draws(DataLoader(args.file).load_draws(), special_only=args.special_only, year=args.year)

    aggregator = HistoricalAggregator(top_signatures=settings.top_signatures)
    try:
        report_distributions(aggregator, draws)
    except EmptyDatasetError:
        logger.error("No draws match the selected filters")
        return 1

    tracker = HotColdTracker(window=args.window, hot_threshold=settings.hot_threshold, cold_lag=settings.cold_lag)
    stats = tracker.track(draws)
    report_hot_cold(tracker, stats)

    if args.bet:
        report_bet(BetScorer(tracker=tracker), args.bet, stats)
    return 0


if __name__ == "__main__":
    sys.exit(main())
