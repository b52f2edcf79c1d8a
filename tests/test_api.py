import pytest
from fastapi.testclient import TestClient

from app.core.config import get_settings
from app.main import app
from app.services.diagnosis_service import get_diagnosis_service


settings = get_settings()
PREFIX = settings.api_prefix


@pytest.fixture(scope="module")
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def headers():
    return {settings.api_key_header: settings.api_key}


def test_health(client):
    response = client.get(f"{PREFIX}/health")

    body = response.json()
    assert response.status_code == 200
    assert body["status"] == "healthy"
    assert body["kb_status"] == "loaded"
    assert body["kb_version"] == "1.2.0"
    assert "X-Request-ID" in response.headers


def test_diagnose_requires_api_key(client):
    response = client.post(f"{PREFIX}/diagnose", json={"symptoms": ["fever"]})

    assert response.status_code == 401
    assert response.json()["error"] == "API Key requerida"


def test_diagnose_rejects_wrong_api_key(client):
    response = client.post(
        f"{PREFIX}/diagnose",
        json={"symptoms": ["fever"]},
        headers={settings.api_key_header: "nope"},
    )

    assert response.status_code == 401


def test_diagnose_flu(client, headers):
    response = client.post(
        f"{PREFIX}/diagnose",
        json={"symptoms": ["FEVER", "cough", " muscle_ache ", "fatigue"]},
        headers=headers,
    )

    body = response.json()
    assert response.status_code == 200
    assert body["symptoms"] == ["cough", "fatigue", "fever", "muscle_ache"]
    assert body["kb_version"] == "1.2.0"
    top = body["diagnoses"][0]
    assert top["disease_id"] == "flu"
    assert top["score_percent"] == 100
    assert top["proof"]["rule_id"] == "R1"
    assert top["proof"]["evidence"] == ["fever", "cough", "muscle_ache", "fatigue"]


def test_diagnose_empty_fact_set(client, headers):
    response = client.post(f"{PREFIX}/diagnose", json={"symptoms": []}, headers=headers)

    assert response.status_code == 200
    assert response.json()["diagnoses"] == []


def test_diagnose_rejects_unknown_symptom(client, headers):
    response = client.post(
        f"{PREFIX}/diagnose",
        json={"symptoms": ["fever", "hiccups"]},
        headers=headers,
    )

    assert response.status_code == 422


def test_catalog_endpoints(client, headers):
    symptoms = client.get(f"{PREFIX}/symptoms", headers=headers).json()
    diseases = client.get(f"{PREFIX}/diseases", headers=headers).json()
    rules = client.get(f"{PREFIX}/rules", headers=headers).json()
    info = client.get(f"{PREFIX}/knowledge-base", headers=headers).json()

    assert len(symptoms) == 14
    assert {"id": "flu", "name": "Influenza (Flu)"}.items() <= diseases[0].items()
    assert rules[-1]["id"] == "R14"
    assert rules[-1]["exclusions"] == ["nausea"]
    assert info["n_rules"] == 13
    assert info["source"] == "builtin"


def test_metrics_count_diagnoses(client, headers):
    before = client.get(f"{PREFIX}/metrics", headers=headers).json()["total_diagnoses"]
    client.post(f"{PREFIX}/diagnose", json={"symptoms": ["headache"]}, headers=headers)

    after = client.get(f"{PREFIX}/metrics", headers=headers).json()

    assert after["total_diagnoses"] == before + 1


def test_reload_requires_api_key(client):
    assert client.post(f"{PREFIX}/knowledge-base/reload").status_code == 401


def test_reload_builtin(client, headers):
    response = client.post(f"{PREFIX}/knowledge-base/reload", headers=headers)

    assert response.status_code == 200
    assert response.json()["version"] == "1.2.0"


def test_failed_reload_keeps_previous_snapshot(client, headers, kb_file, monkeypatch):
    service = get_diagnosis_service()
    monkeypatch.setattr(service._provider, "path", kb_file('{"rules": [{"id": "R1"}]}'))

    response = client.post(f"{PREFIX}/knowledge-base/reload", headers=headers)

    assert response.status_code == 422
    assert response.json()["details"]["problems"]
    assert service.knowledge_base.version == "1.2.0"


def test_reload_with_null_section_returns_422(client, headers, kb_file, monkeypatch):
    service = get_diagnosis_service()
    monkeypatch.setattr(service._provider, "path", kb_file('{"rules": null}'))

    response = client.post(f"{PREFIX}/knowledge-base/reload", headers=headers)

    assert response.status_code == 422
    assert response.json()["details"]["problems"][0].startswith("rules:")
    assert service.knowledge_base.version == "1.2.0"


def test_root(client):
    assert client.get("/").json()["service"] == settings.api_title
