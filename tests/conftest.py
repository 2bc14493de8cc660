"""Pytest configuration and shared fixtures.

Puts the project root on sys.path so the top-level packages import the same
way the dashboard imports them.
"""

import sys
from pathlib import Path

import pandas as pd
import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from data_prep.observations import Observation  # noqa: E402
from engine.base import Entity  # noqa: E402

HEADER = "Week Of,Weekly Average Credit Price ($)\n"


@pytest.fixture
def make_csv():
    """Build CSV bytes from (week, price) string pairs under the standard header."""

    def _make(rows):
        body = "".join(f"{week},{price}\n" for week, price in rows)
        return (HEADER + body).encode("utf-8")

    return _make


@pytest.fixture
def observations():
    return (
        Observation(date=pd.Timestamp("2024-01-01"), price=5.0),
        Observation(date=pd.Timestamp("2024-01-08"), price=5.5),
        Observation(date=pd.Timestamp("2024-01-15"), price=2.5),
    )


@pytest.fixture
def two_entities():
    return (Entity(name="A", percentage=30.0), Entity(name="B", percentage=70.0))
