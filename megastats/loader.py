"""
MegaStats Data Loader
=====================
Reads historical draws from a JSON dataset and selects draw subsets.

Dataset format: a JSON array of objects with the keys
concurso (contest), data (date), dezenas (numbers) and tipo (category).
Precomputed 'analises' blocks are ignored; metrics are always recomputed.
"""

import json
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd
from loguru import logger

from megastats.exceptions import InvalidDrawError
from megastats.hot_cold import newest_first
from megastats.models import DrawRecord


def parse_draws(raw_draws: Sequence[Dict[str, Any]]) -> List[DrawRecord]:
    """
    Build DrawRecords from raw mappings, newest first.

    Records that fail validation are logged and skipped, never coerced.
    """
    draws = []
    skipped = 0
    for raw in raw_draws:
        if not isinstance(raw, dict):
            logger.warning(f"Skipping non-object draw entry: {raw!r}")
            skipped += 1
            continue
        try:
            draws.append(DrawRecord.from_dict(raw))
        except InvalidDrawError as e:
            logger.warning(f"Skipping invalid draw: {e}")
            skipped += 1

    if skipped:
        logger.warning(f"Skipped {skipped} invalid draw records out of {len(raw_draws)}")
    return newest_first(draws)


class DataLoader:
    """
    Loads historical draws from a JSON file.
    This class acts as an abstraction layer for data retrieval.
    """

    def __init__(self, path: str):
        self.path = path
        logger.info(f"DataLoader initialized to read from {path}")

    def load_draws(self) -> List[DrawRecord]:
        """
        Load all valid draws, newest first.

        Raises:
            FileNotFoundError: If the dataset file does not exist
            ValueError: If the file is not a JSON array
        """
        with open(self.path, encoding="utf-8") as f:
            payload = json.load(f)

        if not isinstance(payload, list):
            raise ValueError(f"Expected a JSON array of draws in {self.path}, got {type(payload).__name__}")

        draws = parse_draws(payload)
        if not draws:
            logger.warning(f"No valid draws found in {self.path}")
        else:
            logger.info(f"Loaded {len(draws)} draws from {self.path} "
                        f"({sum(1 for d in draws if d.is_special)} special)")
        return draws


def draws_to_dataframe(draws: Sequence[DrawRecord]) -> pd.DataFrame:
    """
    Flatten draws into a DataFrame with columns contest, draw_date, n1-n6, category.
    """
    columns = ['contest', 'draw_date', 'n1', 'n2', 'n3', 'n4', 'n5', 'n6', 'category']
    rows = []
    for draw in draws:
        row = {'contest': draw.contest, 'draw_date': pd.Timestamp(draw.draw_date), 'category': draw.category.value}
        for i, n in enumerate(draw.numbers, start=1):
            row[f'n{i}'] = n
        rows.append(row)
    return pd.DataFrame(rows, columns=columns)


def select_draws(
    draws: Sequence[DrawRecord],
    special_only: bool = False,
    year: Optional[int] = None
) -> List[DrawRecord]:
    """
    Select a draw subset, preserving order.

    Args:
        draws: Full history
        special_only: Keep only special (year-end) draws
        year: Keep only draws from this calendar year
    """
    selected = []
    for draw in draws:
        if special_only and not draw.is_special:
            continue
        if year is not None and draw.draw_date.year != int(year):
            continue
        selected.append(draw)

    logger.debug(f"Selected {len(selected)}/{len(draws)} draws (special_only={special_only}, year={year})")
    return selected
