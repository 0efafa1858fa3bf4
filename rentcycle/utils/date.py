from typing import Union
from datetime import datetime, date
import calendar

from dateutil.relativedelta import relativedelta
from pandas import Timestamp

DATE_FMT = "%Y-%m-%d"
COMPACT_FMT = "%Y%m%d"

DateLike = Union[str, date, datetime, Timestamp]


def to_date(date_like: DateLike) -> date:
    """
    Convert a string, datetime or Timestamp to a plain calendar date.
    Accepts 'YYYY-MM-DD' and 'YYYYMMDD' string formats, as well as full
    ISO-8601 timestamps ('2024-03-01T00:00:00.000Z'), keeping only the date part.
    """
    if isinstance(date_like, Timestamp):
        return date_like.date()
    if isinstance(date_like, datetime):
        return date_like.date()
    if isinstance(date_like, date):
        return date_like
    if isinstance(date_like, str):
        text = date_like.strip()
        for fmt in (DATE_FMT, COMPACT_FMT):
            try:
                return datetime.strptime(text, fmt).date()
            except ValueError:
                continue
        if "T" in text:
            if text.endswith("Z"):
                text = text[:-1] + "+00:00"
            try:
                return datetime.fromisoformat(text).date()
            except ValueError as exc:
                raise ValueError(f"Unsupported date string format: {date_like!r}") from exc
        raise ValueError(f"Unsupported date string format: {date_like!r}")
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


def normalize_date(date_like: DateLike) -> date:
    """
    Strip the time-of-day so comparisons are day-granular.
    """
    return to_date(date_like)


def datetime_to_str(date_like: DateLike) -> str:
    """
    Format a date-like into 'YYYY-MM-DD' string.
    """
    return to_date(date_like).strftime(DATE_FMT)


def days_in_month(year: int, month: int) -> int:
    """
    Number of days in the given month (1-12), honouring the Gregorian leap rule.
    """
    return calendar.monthrange(year, month)[1]


def clamp_to_valid_date(year: int, month: int, day: int) -> date:
    """
    Return (year, month, min(day, days_in_month)).

    Months outside 1..12 roll into the neighbouring years, so callers may pass
    ``month + 1`` without handling December themselves.
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    return date(year, month, min(day, days_in_month(year, month)))


def add_days(date_like: DateLike, days: int) -> date:
    return to_date(date_like) + relativedelta(days=days)


def is_same_date(first: DateLike, second: DateLike) -> bool:
    """
    True if both values fall on the same calendar day, ignoring time.
    """
    return to_date(first) == to_date(second)
