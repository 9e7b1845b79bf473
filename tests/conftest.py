"""
Pytest fixtures for LineageGate tests.
"""

import os

import pytest

# Ensure test config is set before importing lineagegate modules.
os.environ.setdefault("LINEAGEGATE_ALLOW_INSECURE_DEV", "true")
os.environ.setdefault("LINEAGEGATE_ENV", "development")
os.environ.setdefault("LINEAGEGATE_COLLECTOR_ID", "sdc-test-1")

from lineagegate.engine import build_event
from lineagegate.models import LineageEventType
from lineagegate.observability.metrics import metrics


FIXED_MILLIS = 1_700_000_000_000
START_TIME = 1_699_999_000_000


@pytest.fixture(autouse=True)
def reset_metrics():
    """Keep metric counters isolated per test."""
    metrics.reset()
    yield
    metrics.reset()


@pytest.fixture
def make_event():
    """Build an event with sensible defaults; keyword overrides replace them."""

    def _make(event_type=LineageEventType.START, **overrides):
        kwargs = dict(
            name="Orders to lake",
            user="admin",
            start_time=START_TIME,
            pipeline_id="local-id",
            collector_id="sdc-test-1",
            permalink="http://localhost:18630/collector/pipeline/local-id",
            stage_name="pipeline",
            description="test",
            version="7",
            metadata=None,
            parameters=None,
        )
        kwargs.update(overrides)
        kwargs.setdefault("clock", lambda: FIXED_MILLIS)
        return build_event(event_type, **kwargs)

    return _make
