"""Relative expressions: an anchor keyword plus an optional signed duration."""

import re
from datetime import datetime, timedelta, timezone

from dateutil.relativedelta import relativedelta

from .durations import parse_duration
from .errors import InvalidDurationError, UnsupportedFormatError

# First characters that route a string to the relative grammar.
RELATIVE_PREFIXES = frozenset("+-ntl")

RELATIVE_RE = re.compile(r"(?P<anchor>[A-Za-z]*)(?P<offset>[+-].*)?", re.DOTALL)


def _midnight(moment: datetime) -> datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def _month_start(moment: datetime, months: int = 0) -> datetime:
    return _midnight(moment).replace(day=1) + relativedelta(months=months)


ANCHORS = {
    "": lambda base: base,
    "now": lambda base: base,
    "today": _midnight,
    "thisMonth": _month_start,
    "lastMonth": lambda base: _month_start(base, -1),
    "nextMonth": lambda base: _month_start(base, 1),
}


def is_relative(text: str) -> bool:
    return text[:1] in RELATIVE_PREFIXES


def add_elapsed(moment: datetime, delta: timedelta, text: str = "") -> datetime:
    """Add ``delta`` as elapsed time, keeping ``moment``'s zone.

    The sum is computed in UTC, so an hour is always an elapsed hour.
    """
    try:
        shifted = moment.astimezone(timezone.utc) + delta
        return shifted.astimezone(moment.tzinfo)
    except OverflowError as exc:
        raise InvalidDurationError(f"duration in {text!r} moves the time out of range", text) from exc


def resolve_relative(base: datetime, text: str) -> datetime:
    """Resolve ``text`` such as ``today-2s`` or ``+1h30m`` against ``base``."""
    match = RELATIVE_RE.fullmatch(text)
    if match is None:
        raise UnsupportedFormatError(text)

    anchor = ANCHORS.get(match.group("anchor"))
    if anchor is None:
        raise UnsupportedFormatError(text)
    moment = anchor(base)

    offset = match.group("offset")
    if offset:
        # Offsets after an anchor take integer quantities only.
        try:
            delta = parse_duration(offset, strict=bool(match.group("anchor")))
        except InvalidDurationError as exc:
            raise InvalidDurationError(f"{exc} in {text!r}", text) from exc
        moment = add_elapsed(moment, delta, text)
    return moment
