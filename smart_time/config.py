"""Configuration for the package-level time shortcuts."""

import os
from datetime import tzinfo
from typing import Optional

from dateutil import tz
from pydantic import BaseModel, ConfigDict, Field, field_validator

TIMEZONE_ENV = "SMART_TIME_TIMEZONE"
LOCAL_ALIASES = {"", "local"}


class ResolverConfig(BaseModel):
    """Settings used when a resolver is built from the wall clock."""

    model_config = ConfigDict(validate_assignment=True)

    timezone: Optional[str] = Field(
        default=None,
        description="Zone name for the base instant; None or 'local' uses the system zone",
    )

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v):
        """Validate the zone name resolves to a tzinfo."""
        if v is None:
            return None
        v = v.strip()
        if v.lower() in LOCAL_ALIASES:
            return None
        if tz.gettz(v) is None:
            raise ValueError(f"Unknown time zone: {v!r}")
        return v

    @classmethod
    def from_env(cls) -> "ResolverConfig":
        """Build a config from ``SMART_TIME_TIMEZONE``."""
        return cls(timezone=os.environ.get(TIMEZONE_ENV))

    def tzinfo(self) -> tzinfo:
        """Return the configured zone, falling back to the local one."""
        if self.timezone is None:
            return tz.tzlocal()
        return tz.gettz(self.timezone)
