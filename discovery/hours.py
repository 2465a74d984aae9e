"""
Opening-hours evaluation for fixed venues.

Everything here fails closed: a missing or malformed schedule reads as
"closed", never as an error. The venue's own ``available`` flag stays the
authoritative signal; these helpers only feed the display.
"""

import logging
import re
from datetime import datetime, timedelta
from typing import Any, List, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from .schemas import HoursSummary, HoursSummaryKind, OpeningHours

log = logging.getLogger(__name__)

# Indexed by datetime.weekday()
WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")

_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})$", re.ASCII)

HoursLike = Union[OpeningHours, Mapping[str, Any], None]


def coerce_opening_hours(raw: HoursLike) -> Optional[OpeningHours]:
    """Validate a stored schedule; anything that does not validate is treated as absent."""
    if raw is None or isinstance(raw, OpeningHours):
        return raw
    try:
        return OpeningHours.model_validate(raw)
    except ValidationError as e:
        log.warning("Ignoring malformed opening hours (%d errors)", e.error_count())
        return None


def parse_time(value: Optional[str]) -> Optional[int]:
    """'HH:MM' -> minutes after midnight, or None when missing/unparseable."""
    if not value:
        return None
    m = _TIME_RE.match(value.strip())
    if not m:
        log.warning("Unparseable time of day %r", value)
        return None
    hour, minute = int(m.group(1)), int(m.group(2))
    if minute > 59 or hour > 24 or (hour == 24 and minute):
        log.warning("Time of day out of range %r", value)
        return None
    return hour * 60 + minute


def _day_window(hours: OpeningHours, day: str) -> Optional[Tuple[int, int]]:
    entry = getattr(hours, day)
    if entry is None:
        return None
    opens, closes = parse_time(entry.open), parse_time(entry.close)
    if opens is None or closes is None:
        return None
    return opens, closes


def is_open_now(hours: HoursLike, now: Optional[datetime] = None) -> bool:
    hours = coerce_opening_hours(hours)
    if hours is None:
        return False
    now = now or datetime.now()
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)

    window = _day_window(hours, WEEKDAYS[now.weekday()])
    if window is not None:
        open_at = midnight + timedelta(minutes=window[0])
        close_at = midnight + timedelta(minutes=window[1])
        moment = now
        if close_at <= open_at:
            # overnight: one continuous interval crossing midnight once
            close_at += timedelta(days=1)
            if moment < open_at:
                moment += timedelta(days=1)
        if open_at <= moment < close_at:
            return True

    # yesterday's overnight window still running past midnight
    window = _day_window(hours, WEEKDAYS[(now.weekday() - 1) % 7])
    if window is not None and window[1] <= window[0]:
        open_at = midnight - timedelta(days=1) + timedelta(minutes=window[0])
        close_at = midnight + timedelta(minutes=window[1])
        if open_at <= now < close_at:
            return True

    return False


def todays_hours_summary(hours: HoursLike, now: Optional[datetime] = None) -> HoursSummary:
    closed = HoursSummary(kind=HoursSummaryKind.CLOSED_TODAY)
    hours = coerce_opening_hours(hours)
    if hours is None:
        return closed
    now = now or datetime.now()
    day = WEEKDAYS[now.weekday()]
    if _day_window(hours, day) is None:
        return closed
    entry = getattr(hours, day)
    return HoursSummary(
        kind=HoursSummaryKind.OPEN_TODAY,
        params={"open": entry.open.strip(), "close": entry.close.strip()},
    )


def generate_time_options(step_minutes: int = 30) -> List[str]:
    return [f"{m // 60:02d}:{m % 60:02d}" for m in range(0, 24 * 60, step_minutes)]
