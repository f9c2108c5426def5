"""Error types raised while resolving time strings."""

from typing import Any, Dict, Optional, Sequence

from pydantic import BaseModel, Field


class ParseFailure(BaseModel):
    """Structured description of a failed resolution."""

    error_code: str = Field(..., description="Machine-readable error code")
    error_message: str = Field(..., description="Human-readable error message")
    text: str = Field(..., description="The input that could not be resolved")
    context: Optional[Dict[str, Any]] = Field(None, description="Additional error context")


class TimeParseError(ValueError):
    """Base class for every resolution failure."""

    error_code = "time_parse_error"

    def __init__(self, message: str, text: str = ""):
        super().__init__(message)
        self.text = text

    def _context(self) -> Optional[Dict[str, Any]]:
        return None

    def to_failure(self) -> ParseFailure:
        """Return this error as a :class:`ParseFailure` record."""
        return ParseFailure(
            error_code=self.error_code,
            error_message=str(self),
            text=self.text,
            context=self._context(),
        )


class EmptyInputError(TimeParseError):
    error_code = "empty_input"

    def __init__(self):
        super().__init__("time string cannot be empty", "")


class InvalidDurationError(TimeParseError):
    error_code = "invalid_duration"


class UnsupportedFormatError(TimeParseError):
    error_code = "unsupported_format"

    def __init__(self, text: str):
        super().__init__(f"unsupported time format: {text!r}", text)


class LayoutParseError(TimeParseError):
    """Input length matched a layout bucket but no layout in it accepted the text."""

    error_code = "layout_parse_error"

    def __init__(self, text: str, layouts: Sequence[str]):
        tried = ", ".join(layouts)
        super().__init__(f"cannot parse {text!r} as any of: {tried}", text)
        self.layouts = tuple(layouts)

    def _context(self) -> Optional[Dict[str, Any]]:
        return {"layouts": list(self.layouts)}


class InvalidConfigError(TimeParseError):
    """The environment named a time zone that cannot be resolved."""

    error_code = "invalid_config"


class MustParseTimeError(RuntimeError):
    """Raised by ``must_parse_time`` when resolution fails.

    Not a :class:`TimeParseError`, so handlers written for ordinary parse
    failures do not swallow it.
    """

    def __init__(self, text: str, cause: TimeParseError):
        super().__init__(f"must_parse_time({text!r}) failed: {cause}")
        self.text = text
        self.cause = cause
