"""
HTTP preview API tests.
"""

import pytest
from starlette.testclient import TestClient

from lineagegate.api.deps import validate_auth_config
from lineagegate.config import Environment, settings
from lineagegate.main import app


@pytest.fixture
def client():
    return TestClient(app)


def _request(**overrides):
    body = {
        "event_type": "START",
        "name": "Orders to lake",
        "user": "admin",
        "start_time": 1_699_999_000_000,
        "pipeline_id": "orders::1",
        "stage_name": "pipeline",
        "description": "Nightly export",
        "version": "3",
    }
    body.update(overrides)
    return body


def test_health(client):
    response = client.get("/v1/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_config_reports_registry(client):
    response = client.get("/v1/config")

    assert response.status_code == 200
    data = response.json()
    assert data["collector_id"] == "sdc-test-1"
    assert data["required_attributes"]["START"] == ["description"]
    assert data["sensitive_key_patterns"] == ["password"]


def test_preview_start_event(client):
    response = client.post(
        "/v1/events/preview",
        json=_request(parameters={"DB_PASSWORD": "secret12", "batchSize": 100}),
    )

    assert response.status_code == 200
    data = response.json()
    assert data["publishable"] is True
    assert data["missing_attributes"] == []
    assert data["event"]["general"]["pipelineId"] == "orders::1"
    assert data["event"]["general"]["sdcId"] == "sdc-test-1"
    assert data["event"]["general"]["permalink"] == (
        f"{settings.collector_base_url}/collector/pipeline/orders%3A%3A1"
    )
    assert data["event"]["properties"] == {
        "pipelineVersion": "3",
        "DB_PASSWORD": "********",
        "batchSize": "100",
    }
    assert "secret12" not in response.text
    assert data["rendered"].startswith("LineageEvent general: ")


def test_preview_control_plane_identity(client):
    response = client.post(
        "/v1/events/preview",
        json=_request(metadata={"dpm.pipeline.id": "X", "dpm.pipeline.version": "2", "pipelineLabels": ["a"]}),
    )

    event = response.json()["event"]
    assert event["general"]["pipelineId"] == "X"
    assert event["properties"]["pipelineVersion"] == "2"
    assert event["tags"] == ["a"]


def test_preview_reports_missing_attributes(client):
    response = client.post(
        "/v1/events/preview",
        json=_request(
            event_type="ENTITY_READ",
            specific_attributes={"entityName": "orders", "endpointType": ""},
        ),
    )

    data = response.json()
    assert data["publishable"] is False
    assert data["missing_attributes"] == ["description", "endpointType"]


def test_preview_rejects_malformed_labels(client):
    response = client.post("/v1/events/preview", json=_request(metadata={"pipelineLabels": "a,b"}))

    assert response.status_code == 422
    assert response.json()["detail"]["code"] == "METADATA_TYPE_MISMATCH"


def test_preview_rejects_unknown_attribute_label(client):
    response = client.post("/v1/events/preview", json=_request(specific_attributes={"colour": "red"}))

    assert response.status_code == 422
    assert response.json()["detail"]["code"] == "INVALID_REQUEST"


def test_preview_rejects_unknown_event_type(client):
    response = client.post("/v1/events/preview", json=_request(event_type="RESTART"))

    assert response.status_code == 422


def test_metrics_snapshot(client):
    client.post("/v1/events/preview", json=_request())

    counters = client.get("/v1/metrics").json()["counters"]
    assert counters["lineage.events.built"] == 1


def test_api_key_required_outside_insecure_dev(client, monkeypatch):
    monkeypatch.setattr(settings, "allow_insecure_dev", False)
    monkeypatch.setattr(settings, "api_key", "k3y")

    assert client.get("/v1/health").status_code == 401
    assert client.get("/v1/health", headers={"X-API-Key": "wrong"}).status_code == 401
    assert client.get("/v1/health", headers={"Authorization": "Bearer k3y"}).status_code == 200


def test_insecure_dev_refused_in_production(monkeypatch):
    monkeypatch.setattr(settings, "env", Environment.PRODUCTION)

    with pytest.raises(RuntimeError):
        validate_auth_config()
