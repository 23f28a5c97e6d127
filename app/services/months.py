# app/services/months.py
#
# Month Key Helpers
# Converts booking dates into "YYYY-MM" month keys and computes the
# [start, end_exclusive) date-string range used to filter a month.

import re
from datetime import date
from typing import Tuple

MONTH_KEY_RE = re.compile(r"^(?P<year>\d{4})-(?P<month>\d{2})$")


class InvalidMonthError(ValueError):
    """Raised when a month key is not a well-formed 'YYYY-MM' string."""


# ---- Parsing ----

def parse_month(month_str: str) -> Tuple[int, int]:
    """
    month_str: 'YYYY-MM' with month in 01..12.
    Returns (year, month) or raises InvalidMonthError.
    """
    match = MONTH_KEY_RE.match(month_str or "")
    if not match:
        raise InvalidMonthError(f"month must look like YYYY-MM, got {month_str!r}")

    year = int(match.group("year"))
    month = int(match.group("month"))
    if not (1 <= month <= 12) or year < 1:
        raise InvalidMonthError(f"month out of range: {month_str!r}")
    return year, month


def is_valid_month(month_str: str) -> bool:
    try:
        parse_month(month_str)
    except InvalidMonthError:
        return False
    return True


def month_key(created_on: str) -> str:
    """'2024-12-15' -> '2024-12'"""
    return created_on[:7]


# ---- Range Utilities ----

def next_month_start(month_str: str) -> str:
    """
    First day of the month after `month_str`, as 'YYYY-MM-DD'.
    December rolls over into January of the next year.
    """
    year, month = parse_month(month_str)
    # months since year 0, plus one
    index = year * 12 + month
    return date(index // 12, index % 12 + 1, 1).isoformat()


def get_month_range(month_str: str) -> Tuple[str, str]:
    """
    Returns (start, end_exclusive) as 'YYYY-MM-DD' strings, suitable for
    comparing against the lexicographically sortable `created_on` column.
    """
    end_exclusive = next_month_start(month_str)
    return f"{month_str}-01", end_exclusive


# ---- Display ----

def format_month_display(month_str: str) -> str:
    """'2024-03' -> 'March 2024'. Malformed keys are returned unchanged."""
    try:
        year, month = parse_month(month_str)
    except InvalidMonthError:
        return month_str
    return date(year, month, 1).strftime("%B %Y")
