"""Duration strings such as ``1h30m``, ``-1.5h`` or ``250ms``."""

import re
from datetime import timedelta

from .errors import InvalidDurationError

NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

UNITS = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,  # micro sign
    "μs": MICROSECOND,  # greek small letter mu
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

# Largest magnitude a signed 64-bit nanosecond count can hold.
MAX_DURATION_NS = (1 << 63) - 1

_NUMBER = r"(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)"
_INTEGER = r"[0-9]+"
_UNIT = r"(?:ns|us|µs|μs|ms|h|m|s)"
_DURATION_RE = re.compile(rf"(?:{_NUMBER}{_UNIT})+")
_INTEGER_DURATION_RE = re.compile(rf"(?:{_INTEGER}{_UNIT})+")
_COMPONENT_RE = re.compile(rf"({_NUMBER})({_UNIT})")


def parse_duration_ns(text: str, strict: bool = False) -> int:
    """Return the number of nanoseconds described by ``text``.

    ``text`` is an optional ``+``/``-`` sign followed by one or more
    ``<number><unit>`` pairs. Fractions below one nanosecond are truncated.
    A bare ``0`` is the zero duration. With ``strict`` only integer
    quantities are accepted and every quantity needs a unit.
    """
    sign = 1
    body = text
    if body[:1] in ("+", "-"):
        sign = -1 if body[0] == "-" else 1
        body = body[1:]
    if body == "0" and not strict:
        return 0
    pattern = _INTEGER_DURATION_RE if strict else _DURATION_RE
    if not pattern.fullmatch(body):
        raise InvalidDurationError(f"invalid duration {text!r}", text)

    total = 0
    for number, unit in _COMPONENT_RE.findall(body):
        scale = UNITS[unit]
        whole, _, fraction = number.partition(".")
        total += int(whole or "0") * scale
        if fraction:
            total += int(fraction) * scale // 10 ** len(fraction)
        if total > MAX_DURATION_NS:
            raise InvalidDurationError(f"invalid duration {text!r}: out of range", text)
    return sign * total


def parse_duration(text: str, strict: bool = False) -> timedelta:
    """Parse ``text`` into a :class:`~datetime.timedelta`.

    ``timedelta`` resolves to the microsecond, so any nanosecond remainder is
    truncated toward zero.
    """
    ns = parse_duration_ns(text, strict)
    micros = abs(ns) // MICROSECOND
    return timedelta(microseconds=micros if ns >= 0 else -micros)
