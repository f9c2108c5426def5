import os
from datetime import datetime

import pytest
from dateutil import tz
from dotenv import load_dotenv


def pytest_configure(config):
    # Load .env file before any tests are collected or run
    load_dotenv(dotenv_path=os.path.join(os.path.dirname(__file__), '..', '.env'), override=True)


@pytest.fixture
def shanghai():
    """A fixed-offset zone without DST, so expected values never drift."""
    return tz.gettz("Asia/Shanghai")


@pytest.fixture
def base(shanghai):
    """December 4, 2024 11:22:33 in Shanghai."""
    return datetime(2024, 12, 4, 11, 22, 33, tzinfo=shanghai)
