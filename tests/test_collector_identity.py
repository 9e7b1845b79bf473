"""
Collector identity, permalink and time helper tests.
"""

from datetime import timezone

from lineagegate.instance import detect_collector_id
from lineagegate.utils.links import PARTIAL_URL, build_permalink
from lineagegate.utils.time import epoch_millis, millis_to_datetime


def test_configured_collector_id_wins(monkeypatch):
    monkeypatch.setenv("HOSTNAME", "collector-deployment-abc12")

    assert detect_collector_id("sdc-42") == "sdc-42"


def test_kubernetes_hostname_detected(monkeypatch):
    monkeypatch.setenv("HOSTNAME", "collector-deployment-abc12")

    assert detect_collector_id() == "collector-deployment-abc12"


def test_cloud_run_revision_gets_suffix(monkeypatch):
    monkeypatch.delenv("HOSTNAME", raising=False)
    monkeypatch.setenv("K_REVISION", "collector-00001-abc")

    collector_id = detect_collector_id()

    assert collector_id.startswith("collector-00001-abc-")
    assert len(collector_id) == len("collector-00001-abc-") + 8


def test_hostname_fallback(monkeypatch):
    monkeypatch.delenv("HOSTNAME", raising=False)
    monkeypatch.delenv("K_REVISION", raising=False)
    monkeypatch.setattr("socket.gethostname", lambda: "devbox")

    assert detect_collector_id().startswith("devbox-")


def test_permalink_joins_partial_path():
    assert build_permalink("http://sdc:18630/", "orders") == f"http://sdc:18630{PARTIAL_URL}orders"


def test_permalink_quotes_pipeline_id():
    assert build_permalink("http://sdc:18630", "orders::1/x") == (
        "http://sdc:18630/collector/pipeline/orders%3A%3A1%2Fx"
    )


def test_permalink_without_base_is_relative():
    assert build_permalink(None, "orders") == "/collector/pipeline/orders"


def test_millis_round_trip_to_utc():
    dt = millis_to_datetime(1_700_000_000_000)

    assert dt.tzinfo == timezone.utc
    assert dt.year == 2023
    assert epoch_millis() > 1_700_000_000_000
