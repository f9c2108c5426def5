"""Resolve loosely formatted time strings against a fixed base instant."""

import logging
import os
from datetime import datetime, timezone, tzinfo
from typing import Callable, Optional

from dateutil import tz
from pydantic import ValidationError

from .config import TIMEZONE_ENV, ResolverConfig
from .errors import EmptyInputError, InvalidConfigError, MustParseTimeError, TimeParseError
from .layouts import parse_absolute
from .relative import is_relative, resolve_relative

logger = logging.getLogger(__name__)

CustomParser = Callable[[str, Optional[tzinfo]], Optional[datetime]]

# The "unset" instant, distinct from the Unix epoch.
ZERO_TIME = datetime.min.replace(tzinfo=timezone.utc)
ZERO_LITERALS = frozenset({"0", "zero"})


def is_zero(moment: datetime) -> bool:
    """Return ``True`` if ``moment`` is the unset instant."""
    return moment.tzinfo is not None and moment == ZERO_TIME


class TimeResolver:
    """Turns strings like ``today-2s``, ``241204`` or ``1400010056123`` into instants.

    Every timezone-less result is expressed in the zone of ``base``; strings
    carrying an explicit UTC offset keep that offset instead.
    """

    def __init__(self, base: datetime, custom_parser: Optional[CustomParser] = None):
        """Initialize the resolver.

        Args:
            base: Reference instant; a naive value is taken as local time
            custom_parser: Optional hook tried before the built-in rules
        """
        if base.tzinfo is None:
            base = base.replace(tzinfo=tz.tzlocal())
        self._base = base
        self._custom_parser = custom_parser

    @property
    def base(self) -> datetime:
        return self._base

    @property
    def custom_parser(self) -> Optional[CustomParser]:
        return self._custom_parser

    def __repr__(self) -> str:
        return f"TimeResolver(base={self._base.isoformat()!r})"

    def with_custom_parser(self, parser: Optional[CustomParser]) -> "TimeResolver":
        """Attach (or with ``None`` detach) the custom hook and return ``self``.

        The hook receives ``(text, base_tzinfo)`` and returns a ``datetime``
        on success. Returning ``None`` or raising ``ValueError`` lets the
        built-in rules handle the text.
        """
        self._custom_parser = parser
        return self

    def _try_custom_parser(self, text: str) -> Optional[datetime]:
        if self._custom_parser is None:
            return None
        try:
            moment = self._custom_parser(text, self._base.tzinfo)
        except ValueError as exc:
            logger.debug("custom parser declined %r: %s", text, exc)
            return None
        if moment is None:
            logger.debug("custom parser declined %r", text)
        return moment

    def parse_time(self, text: str) -> datetime:
        """Resolve ``text`` to an aware ``datetime``.

        Raises:
            EmptyInputError: ``text`` is empty
            InvalidDurationError: a relative expression has a malformed duration
            UnsupportedFormatError: no rule recognizes ``text``
            LayoutParseError: the length matched known layouts but none parsed
        """
        moment = self._try_custom_parser(text)
        if moment is not None:
            return moment

        if text == "":
            raise EmptyInputError()
        if text in ZERO_LITERALS:
            return ZERO_TIME
        if text == "now":
            return self._base
        if is_relative(text):
            return resolve_relative(self._base, text)
        return parse_absolute(text, self._base.tzinfo)

    def must_parse_time(self, text: str) -> datetime:
        """Like :meth:`parse_time` but escalates failure to :class:`MustParseTimeError`.

        Only for input that has already been validated.
        """
        try:
            return self.parse_time(text)
        except TimeParseError as exc:
            logger.critical("must_parse_time failed for %r: %s", text, exc)
            raise MustParseTimeError(text, exc) from exc

    def try_parse_time(self, text: str, default: Optional[datetime] = None) -> Optional[datetime]:
        """Return the resolved instant, or ``default`` when ``text`` is not understood."""
        try:
            return self.parse_time(text)
        except TimeParseError:
            return default


def now_base(config: Optional[ResolverConfig] = None) -> TimeResolver:
    """Return a resolver anchored at the current wall-clock time.

    Without ``config`` the zone comes from the environment; an unusable value
    there raises :class:`InvalidConfigError`.
    """
    if config is None:
        try:
            config = ResolverConfig.from_env()
        except ValidationError as exc:
            raise InvalidConfigError(f"invalid {TIMEZONE_ENV}: {exc}", os.environ.get(TIMEZONE_ENV, "")) from exc
    return TimeResolver(datetime.now(config.tzinfo()))


def parse_time(text: str) -> datetime:
    return now_base().parse_time(text)


def must_parse_time(text: str) -> datetime:
    try:
        resolver = now_base()
    except InvalidConfigError as exc:
        logger.critical("must_parse_time failed for %r: %s", text, exc)
        raise MustParseTimeError(text, exc) from exc
    return resolver.must_parse_time(text)


def try_parse_time(text: str, default: Optional[datetime] = None) -> Optional[datetime]:
    try:
        resolver = now_base()
    except InvalidConfigError:
        return default
    return resolver.try_parse_time(text, default)
