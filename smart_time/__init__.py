"""Smart Time - resolve human-friendly time strings into aware datetimes."""

# Import modules for re-export
from . import config, durations, errors, layouts, relative, resolver

# Expose the resolver and shortcuts
from .resolver import (
    ZERO_TIME,
    TimeResolver,
    is_zero,
    must_parse_time,
    now_base,
    parse_time,
    try_parse_time,
)
from .durations import parse_duration
from .config import ResolverConfig

# Expose error types
from .errors import (
    EmptyInputError,
    InvalidConfigError,
    InvalidDurationError,
    LayoutParseError,
    MustParseTimeError,
    ParseFailure,
    TimeParseError,
    UnsupportedFormatError,
)

# Explicit re-exports
__all__ = [
    # Modules
    "config",
    "durations",
    "errors",
    "layouts",
    "relative",
    "resolver",
    # Resolver
    "TimeResolver",
    "now_base",
    "parse_time",
    "must_parse_time",
    "try_parse_time",
    "parse_duration",
    "ZERO_TIME",
    "is_zero",
    "ResolverConfig",
    # Errors
    "TimeParseError",
    "EmptyInputError",
    "InvalidConfigError",
    "InvalidDurationError",
    "UnsupportedFormatError",
    "LayoutParseError",
    "MustParseTimeError",
    "ParseFailure",
]
