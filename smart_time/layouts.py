"""Fixed-length absolute formats.

Absolute strings are routed by their length to a bucket of parsers that are
tried in order; the first one that accepts the text wins.
"""

import logging
import re
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Dict, Optional, Tuple

from .errors import LayoutParseError, UnsupportedFormatError

logger = logging.getLogger(__name__)

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_TOKENS = {
    "yyyy": r"(?P<year>[0-9]{4})",
    "yy": r"(?P<year2>[0-9]{2})",
    "MM": r"(?P<month>[0-9]{2})",
    "dd": r"(?P<day>[0-9]{2})",
    "HH": r"(?P<hour>[0-9]{2})",
    "mm": r"(?P<minute>[0-9]{2})",
    "ss": r"(?P<second>[0-9]{2})",
    "SSS": r"(?P<millis>[0-9]{3})",
    "±HHMM": r"(?P<tz_sign>[+-])(?P<tz_hours>[0-9]{2})(?P<tz_minutes>[0-9]{2})",
    "±HH": r"(?P<tz_sign>[+-])(?P<tz_hours>[0-9]{2})",
}
_TOKEN_RE = re.compile("|".join(re.escape(token) for token in _TOKENS))


def _expand_year(two_digits: int) -> int:
    # 69-99 -> 1969-1999, 00-68 -> 2000-2068
    return two_digits + (1900 if two_digits >= 69 else 2000)


class Layout:
    """A textual pattern such as ``yyyy-MM-dd HH:mm:ss`` with fixed field widths."""

    def __init__(self, name: str):
        self.name = name
        pattern = []
        position = 0
        for token in _TOKEN_RE.finditer(name):
            pattern.append(re.escape(name[position:token.start()]))
            pattern.append(_TOKENS[token.group()])
            position = token.end()
        pattern.append(re.escape(name[position:]))
        self.regex = re.compile("".join(pattern))
        self.has_offset = "tz_sign" in self.regex.groupindex

    def __repr__(self) -> str:
        return f"Layout({self.name!r})"

    def _offset(self, fields: Dict[str, Optional[str]]) -> Optional[tzinfo]:
        hours = int(fields["tz_hours"])
        minutes = int(fields.get("tz_minutes") or "0")
        if minutes >= 60:
            return None
        offset = timedelta(hours=hours, minutes=minutes)
        if offset >= timedelta(hours=24):
            return None
        return timezone(-offset if fields["tz_sign"] == "-" else offset)

    def parse(self, text: str, tz: Optional[tzinfo]) -> Optional[datetime]:
        """Return the instant for ``text`` or ``None`` if it does not fit.

        ``tz`` applies only when the layout carries no offset of its own.
        """
        match = self.regex.fullmatch(text)
        if match is None:
            return None
        fields = match.groupdict()

        if self.has_offset:
            tz = self._offset(fields)
            if tz is None:
                return None

        if fields.get("year") is not None:
            year = int(fields["year"])
        else:
            year = _expand_year(int(fields["year2"]))
        try:
            return datetime(
                year,
                int(fields["month"]),
                int(fields["day"]),
                int(fields.get("hour") or 0),
                int(fields.get("minute") or 0),
                int(fields.get("second") or 0),
                int(fields.get("millis") or 0) * 1000,
                tzinfo=tz,
            )
        except ValueError:
            return None


class UnixTimestamp:
    """A base-10 integer counting ``unit`` seconds since the Unix epoch."""

    _INTEGER_RE = re.compile(r"[+-]?[0-9]+")

    def __init__(self, name: str, unit: timedelta):
        self.name = name
        self.unit = unit

    def __repr__(self) -> str:
        return f"UnixTimestamp({self.name!r})"

    def parse(self, text: str, tz: Optional[tzinfo]) -> Optional[datetime]:
        if self._INTEGER_RE.fullmatch(text) is None:
            return None
        try:
            return (UNIX_EPOCH + int(text) * self.unit).astimezone(tz)
        except OverflowError:
            return None


UNIX_SECONDS = UnixTimestamp("unix seconds", timedelta(seconds=1))
UNIX_MILLISECONDS = UnixTimestamp("unix milliseconds", timedelta(milliseconds=1))

BUCKETS: Dict[int, Tuple] = {
    6: (Layout("yyMMdd"),),
    8: (Layout("yyyyMMdd"), Layout("yy-MM-dd")),
    10: (Layout("yyyy-MM-dd"), UNIX_SECONDS),
    13: (UNIX_MILLISECONDS,),
    14: (Layout("yyyyMMddHHmmss"),),
    19: (Layout("yyyy-MM-dd HH:mm:ss"),),
    22: (Layout("yyyy-MM-dd HH:mm:ss±HH"),),
    23: (Layout("yyyy-MM-dd HH:mm:ss.SSS"),),
    24: (Layout("yyyy-MM-dd HH:mm:ss±HHMM"),),
    26: (Layout("yyyy-MM-dd HH:mm:ss.SSS±HH"),),
    28: (Layout("yyyy-MM-dd HH:mm:ss.SSS±HHMM"),),
}


def parse_absolute(text: str, tz: Optional[tzinfo]) -> datetime:
    """Resolve an absolute date or timestamp string.

    Layouts without an offset are read in ``tz``; layouts with one use it.
    """
    parsers = BUCKETS.get(len(text))
    if parsers is None:
        raise UnsupportedFormatError(text)

    for parser in parsers:
        moment = parser.parse(text, tz)
        if moment is not None:
            return moment
        logger.debug("%r rejected by %s", text, parser.name)
    raise LayoutParseError(text, [parser.name for parser in parsers])
