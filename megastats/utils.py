"""
MegaStats Utilities Module
==========================

Common utility functions used across the application.
"""

from datetime import date, datetime


DRAW_DATE_FORMATS = ("%Y-%m-%d", "%d/%m/%Y")


def parse_draw_date(value) -> date:
    """
    Parse a draw date given as ISO-8601 (YYYY-MM-DD) or DD/MM/YYYY.

    Raises:
        ValueError: If the value matches neither format
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    # ISO timestamps such as 2024-12-31T20:00:00 keep only the date part
    if "T" in text:
        text = text.split("T", 1)[0]

    for fmt in DRAW_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise ValueError(f"Unrecognized draw date: {value!r}")
