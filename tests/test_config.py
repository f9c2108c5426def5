"""Tests for ResolverConfig class."""

import pytest
from datetime import datetime, timedelta
from pydantic import ValidationError

from dateutil import tz

from smart_time.config import TIMEZONE_ENV, ResolverConfig


class TestResolverConfig:
    """Test ResolverConfig class functionality."""

    def test_config_creation_with_defaults(self):
        """Test creating ResolverConfig with default values."""
        config = ResolverConfig()
        assert config.timezone is None
        assert isinstance(config.tzinfo(), tz.tzlocal)

    def test_named_zone(self):
        """Test a named zone resolves to its tzinfo."""
        config = ResolverConfig(timezone="Asia/Shanghai")
        assert config.timezone == "Asia/Shanghai"
        assert config.tzinfo() is not None

    def test_local_aliases(self):
        """Test 'local' and blank names mean the system zone."""
        assert ResolverConfig(timezone="local").timezone is None
        assert ResolverConfig(timezone="  LOCAL ").timezone is None
        assert ResolverConfig(timezone="").timezone is None

    def test_name_is_stripped(self):
        """Test surrounding whitespace is removed."""
        assert ResolverConfig(timezone=" UTC ").timezone == "UTC"

    def test_unknown_zone(self):
        """Test unknown zone names fail validation."""
        with pytest.raises(ValidationError):
            ResolverConfig(timezone="Mars/Olympus_Mons")

    def test_validate_assignment(self):
        """Test assignment is validated too."""
        config = ResolverConfig()
        config.timezone = "UTC"
        assert config.timezone == "UTC"
        with pytest.raises(ValidationError):
            config.timezone = "Mars/Olympus_Mons"


class TestFromEnv:
    """Tests for ResolverConfig.from_env."""

    def test_reads_environment(self, monkeypatch):
        """Test the zone comes from SMART_TIME_TIMEZONE."""
        monkeypatch.setenv(TIMEZONE_ENV, "UTC")
        config = ResolverConfig.from_env()
        assert config.timezone == "UTC"
        assert config.tzinfo().utcoffset(datetime(2024, 1, 1)) == timedelta(0)

    def test_missing_environment(self, monkeypatch):
        """Test an unset variable means local time."""
        monkeypatch.delenv(TIMEZONE_ENV, raising=False)
        assert ResolverConfig.from_env().timezone is None

    def test_invalid_environment(self, monkeypatch):
        """Test a bad value in the environment is rejected."""
        monkeypatch.setenv(TIMEZONE_ENV, "Mars/Olympus_Mons")
        with pytest.raises(ValidationError):
            ResolverConfig.from_env()
