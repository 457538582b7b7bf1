"""
MegaStats Data Models
=====================
Immutable records shared by the analysis components.

- DrawRecord: one historical draw (validated on construction)
- DerivedMetrics: structural metrics of a 6-number combination
- NumberStat: recency/frequency state of a single number
- BetEvaluation: per-factor statuses and aggregate score of a bet
"""

from datetime import date, datetime
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, Dict, List, Mapping, Tuple

from megastats.exceptions import InvalidDrawError
from megastats.utils import parse_draw_date


MIN_NUMBER = 1
MAX_NUMBER = 60
NUMBERS_PER_DRAW = 6


class DrawCategory(str, Enum):
    """Draw category: regular contests vs. the special year-end draw."""
    ORDINARY = "ordinary"
    SPECIAL = "special"

    @classmethod
    def parse(cls, value: Any) -> "DrawCategory":
        """Map a raw category label (including the source 'VIRADA' label) to a category."""
        if isinstance(value, cls):
            return value
        label = str(value or "").strip().lower()
        if label in ("special", "especial", "virada", "mega da virada"):
            return cls.SPECIAL
        return cls.ORDINARY


class FactorStatus(str, Enum):
    """Classification of a single bet factor."""
    SAFE = "safe"
    WARNING = "warning"
    RISK = "risk"

    @property
    def points(self) -> float:
        return {"safe": 1.0, "warning": 0.5, "risk": 0.0}[self.value]


def validate_numbers(numbers) -> Tuple[int, ...]:
    """
    Validate a 6-number combination and return it as a sorted tuple.

    Raises:
        InvalidDrawError: If the combination is not 6 distinct ints in 1-60
    """
    try:
        values = list(numbers)
    except TypeError:
        raise InvalidDrawError(f"Numbers must be an iterable, got {type(numbers).__name__}")

    for n in values:
        if isinstance(n, bool) or not isinstance(n, int):
            raise InvalidDrawError(f"Draw numbers must be integers, got {n!r}")
        if not MIN_NUMBER <= n <= MAX_NUMBER:
            raise InvalidDrawError(f"Draw numbers must be between {MIN_NUMBER} and {MAX_NUMBER}, got {n}")

    if len(values) != NUMBERS_PER_DRAW:
        raise InvalidDrawError(f"A draw must have exactly {NUMBERS_PER_DRAW} numbers, got {len(values)}")
    if len(set(values)) != NUMBERS_PER_DRAW:
        raise InvalidDrawError(f"Draw numbers must be unique, got {sorted(values)}")

    return tuple(sorted(values))


def _parse_digits(value: Any) -> Any:
    """Parse a digit-only string as an int; other values are returned as-is."""
    if isinstance(value, str):
        text = value.strip()
        if text.isascii() and text.isdigit():
            return int(text)
    return value


@dataclass(frozen=True)
class DrawRecord:
    """One historical draw. Construction fails with InvalidDrawError on malformed input."""
    contest: int
    draw_date: date
    numbers: Tuple[int, ...]
    category: DrawCategory = DrawCategory.ORDINARY

    def __post_init__(self):
        if isinstance(self.contest, bool) or not isinstance(self.contest, int):
            raise InvalidDrawError(f"Contest must be an integer, got {self.contest!r}")

        draw_date = self.draw_date
        if isinstance(draw_date, datetime):
            draw_date = draw_date.date()
        elif not isinstance(draw_date, date):
            try:
                draw_date = parse_draw_date(draw_date)
            except ValueError as e:
                raise InvalidDrawError(f"Contest {self.contest}: {e}")

        try:
            numbers = validate_numbers(self.numbers)
        except InvalidDrawError as e:
            raise InvalidDrawError(f"Contest {self.contest}: {e}")

        # frozen dataclass: normalized values are written through object.__setattr__
        object.__setattr__(self, "draw_date", draw_date)
        object.__setattr__(self, "numbers", numbers)
        object.__setattr__(self, "category", DrawCategory.parse(self.category))

    @property
    def is_special(self) -> bool:
        return self.category is DrawCategory.SPECIAL

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "DrawRecord":
        """
        Build a record from a raw mapping.

        Accepts English keys (contest, date, numbers, category) or the
        source dataset keys (concurso, data, dezenas, tipo). Digit-only
        strings such as "04" are parsed as integers. Any other value is
        passed through unchanged and rejected by validation.
        """
        contest = raw.get("contest", raw.get("concurso"))
        draw_date = raw.get("date", raw.get("draw_date", raw.get("data")))
        numbers = raw.get("numbers", raw.get("dezenas"))
        category = raw.get("category", raw.get("tipo"))

        if contest is None or draw_date is None or numbers is None:
            raise InvalidDrawError(f"Draw record is missing required fields: {dict(raw)!r}")

        contest = _parse_digits(contest)
        if isinstance(numbers, (list, tuple)):
            numbers = [_parse_digits(n) for n in numbers]

        return cls(contest=contest, draw_date=draw_date, numbers=numbers, category=category)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "contest": self.contest,
            "date": self.draw_date.isoformat(),
            "numbers": list(self.numbers),
            "category": self.category.value,
        }


@dataclass(frozen=True)
class DerivedMetrics:
    """Structural metrics of one 6-number combination"""
    total: int
    even_count: int
    odd_count: int
    prime_count: int
    fibonacci_count: int
    empty_rows: int
    empty_columns: int
    quadrant_counts: Tuple[int, int, int, int]
    quadrant_signature: str

    @property
    def empty_quadrants(self) -> int:
        return sum(1 for count in self.quadrant_counts if count == 0)

    def to_dict(self) -> Dict[str, Any]:
        result = asdict(self)
        result["quadrant_counts"] = list(self.quadrant_counts)
        result["empty_quadrants"] = self.empty_quadrants
        return result


@dataclass(frozen=True)
class NumberStat:
    """Recency state of a number: appearances in the recent window and draws since last seen"""
    number: int
    recent_frequency: int
    lag: int

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass
class BetEvaluation:
    """Evaluation of a candidate bet against the hot/cold baseline."""
    numbers: Tuple[int, ...]
    metrics: DerivedMetrics
    statuses: Dict[str, FactorStatus]
    score: int
    hot_numbers: List[int] = field(default_factory=list)
    cold_numbers: List[int] = field(default_factory=list)
    recommendation: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "numbers": list(self.numbers),
            "score": self.score,
            "statuses": {name: status.value for name, status in self.statuses.items()},
            "metrics": self.metrics.to_dict(),
            "hot_numbers": list(self.hot_numbers),
            "cold_numbers": list(self.cold_numbers),
            "recommendation": self.recommendation,
        }
