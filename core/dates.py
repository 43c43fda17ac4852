"""Parsing and display of the day-first timestamps found in student responses."""

import re
from datetime import datetime, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from utils.logger import get_logger

logger = get_logger()

DATE_NOT_AVAILABLE = "Date not available"

_DATE_TIME_RE = re.compile(r'^(\d{1,2})/(\d{1,2})/(\d{4})\s+(\d{1,2}):(\d{1,2}):(\d{1,2})$')
_DATE_RE = re.compile(r'^(\d{1,2})/(\d{1,2})/(\d{4})$')
_DAY_MONTH_RE = re.compile(r'^(\d{1,2})/(\d{1,2})/(\d{4})(.*)$', re.DOTALL)


def _build_datetime(year: int, month: int, day: int,
                    hour: int = 0, minute: int = 0, second: int = 0) -> Optional[datetime]:
    """Builds a datetime, rolling out-of-range fields over into the next unit.

    Month 13 is January of the following year, day 0 is the last day of the
    previous month, hour 24 is midnight of the next day, and so on.
    """
    try:
        start = datetime(year, 1, 1) + relativedelta(months=month - 1)
        return start + timedelta(days=day - 1, hours=hour, minutes=minute, seconds=second)
    except (ValueError, OverflowError):
        return None


def _generic_parse(value: str) -> Optional[datetime]:
    try:
        parsed = date_parser.parse(value)
        if parsed.tzinfo is not None:
            # Shifting to local time can leave datetime's range at either end
            parsed = parsed.astimezone().replace(tzinfo=None)
    except (ValueError, OverflowError):
        return None
    return parsed


def parse_date(date_string: str) -> Optional[datetime]:
    """Parses a `D/M/YYYY H:MM:SS` timestamp, falling back to looser formats.

    Returns None when no strategy understands the string.
    """
    match = _DATE_TIME_RE.match(date_string)
    if match:
        day, month, year, hour, minute, second = (int(g) for g in match.groups())
        return _build_datetime(year, month, day, hour, minute, second)

    match = _DATE_RE.match(date_string)
    if match:
        day, month, year = (int(g) for g in match.groups())
        return _build_datetime(year, month, day)

    parsed = _generic_parse(date_string)
    if parsed is None:
        # The generic parser reads slashes month-first; try again with day and month swapped
        swapped = _DAY_MONTH_RE.sub(r'\2/\1/\3\4', date_string)
        parsed = _generic_parse(swapped)

    if parsed is None:
        logger.debug(f"Could not parse date string '{date_string}'")
    return parsed


def ordinal_day(day: int) -> str:
    """Returns the day of the month with its English suffix, e.g. 1st, 12th, 23rd."""
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def long_format(moment: datetime) -> str:
    """16th December 2019 10:46 AM"""
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return f"{short_format(moment)} {hour}:{moment.minute:02d} {meridiem}"


def short_format(moment: datetime) -> str:
    """16th December 2019"""
    return f"{ordinal_day(moment.day)} {moment.strftime('%B')} {moment.year}"


def format_date(date_string: str) -> str:
    """Formats a raw timestamp for report headers, or a placeholder if it can't be read."""
    if not date_string:
        return DATE_NOT_AVAILABLE

    moment = parse_date(date_string)
    if moment is None:
        return f"Invalid date format: {date_string}"
    return long_format(moment)


def format_date_short(date_string: str) -> str:
    """Date-only variant of format_date used for per-attempt lines."""
    if not date_string:
        return DATE_NOT_AVAILABLE

    moment = parse_date(date_string)
    if moment is None:
        return f"Invalid date: {date_string}"
    return short_format(moment)
