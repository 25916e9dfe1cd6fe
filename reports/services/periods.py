"""
periods.py
----------
Date helpers for reports:
- parse 'YYYY-MM-DD' (or date/datetime) into a date
- validate an inclusive [start, end] range
- derive week / month / quarter ranges around an anchor date
"""

import calendar
from datetime import date, datetime, timedelta

from django.utils import timezone
from django.utils.dateparse import parse_date

from installations.exceptions import InvalidRangeError

PERIODS = ("week", "month", "quarter")


def parse_report_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidRangeError(f"Invalid date: {value!r}. Use YYYY-MM-DD.")

    try:
        parsed = parse_date(value.strip())
    except ValueError:
        # well formatted but not a real day, e.g. 2024-02-30
        parsed = None
    if parsed is None:
        raise InvalidRangeError(f"Invalid date: {value!r}. Use YYYY-MM-DD.")
    return parsed


def validate_range(start_date, end_date):
    """
    Return (start, end) as dates.

    Raises:
        InvalidRangeError: unparseable bound or start after end.
    """
    start = parse_report_date(start_date)
    end = parse_report_date(end_date)
    if start > end:
        raise InvalidRangeError(f"Start date {start} is after end date {end}.")
    return start, end


def _month_end(year: int, month: int) -> date:
    return date(year, month, calendar.monthrange(year, month)[1])


def period_range(period: str, anchor=None):
    """
    Inclusive (start, end) for the period containing 'anchor' (default: today).

    - week:    Monday..Sunday
    - month:   1st..last day of the month
    - quarter: calendar quarter (Jan-Mar, Apr-Jun, Jul-Sep, Oct-Dec)
    """
    anchor = timezone.localdate() if anchor is None else parse_report_date(anchor)
    period = (period or "").strip().lower()

    if period == "week":
        start = anchor - timedelta(days=anchor.weekday())
        return start, start + timedelta(days=6)
    if period == "month":
        return anchor.replace(day=1), _month_end(anchor.year, anchor.month)
    if period == "quarter":
        first_month = 3 * ((anchor.month - 1) // 3) + 1
        return date(anchor.year, first_month, 1), _month_end(anchor.year, first_month + 2)

    raise InvalidRangeError(f"Unknown period {period!r}. Choose one of: {', '.join(PERIODS)}.")
