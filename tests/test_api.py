"""
HTTP contract of the intake API.
"""
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from app.main import app


@pytest.fixture
def client():
    with TestClient(app) as client:
        yield client


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "Legal AI Backend is running"
    assert body["timestamp"].endswith("Z")
    datetime.fromisoformat(body["timestamp"].replace("Z", "+00:00"))


def test_analyze_case(client):
    response = client.post(
        "/api/analyze-case",
        json={"userInput": "My employer fired me and retaliated against me"},
    )
    assert response.status_code == 200
    assert response.json() == {
        "issue": "My employer fired me and retaliated against me",
        "type": "Employment Law",
        "claims": ["Wrongful Termination", "Retaliation"],
        "damages": {
            "backPay": 15000,
            "frontPay": 25000,
            "emotional": 0,
            "punitive": 50000,
            "total": 90000,
        },
        "successProbability": 75,
        "documents": [
            "EEOC Charge",
            "Wrongful Termination Complaint",
            "Demand Letter",
        ],
        "actions": [
            "File EEOC charge within 180 days",
            "Send demand letter to employer",
            "Document all communications",
            "Preserve evidence and emails",
        ],
    }


@pytest.mark.parametrize(
    "payload", [{}, {"userInput": ""}, {"userInput": None}, {"userInput": 42}]
)
def test_analyze_case_requires_input(client, payload):
    response = client.post("/api/analyze-case", json=payload)
    assert response.status_code == 400
    assert response.json() == {"error": "User input is required"}


def test_analyze_case_without_body(client):
    response = client.post("/api/analyze-case")
    assert response.status_code == 400
    assert response.json() == {"error": "User input is required"}


def test_analyze_case_internal_failure(client, monkeypatch):
    def boom(text):
        raise RuntimeError("engine exploded")

    monkeypatch.setattr("app.api.cases.analyze_case", boom)
    response = client.post("/api/analyze-case", json={"userInput": "anything"})
    assert response.status_code == 500
    assert response.json() == {"error": "Analysis failed", "details": "engine exploded"}


def test_generate_document_round_trip(client):
    case_data = client.post(
        "/api/analyze-case", json={"userInput": "I was hurt in an accident"}
    ).json()

    response = client.post(
        "/api/generate-document",
        json={"docType": "Legal Complaint", "caseData": case_data},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["docType"] == "Legal Complaint"
    assert "1. Negligence\n2. Personal Injury" in body["document"]
    assert "4. Damages: $52,000" in body["document"]


def test_generate_document_unknown_type(client):
    case_data = client.post("/api/analyze-case", json={"userInput": "help"}).json()
    response = client.post(
        "/api/generate-document",
        json={"docType": "Will and Testament", "caseData": case_data},
    )
    assert response.status_code == 200
    assert response.json() == {
        "document": "Document template not found",
        "docType": "Will and Testament",
    }


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"docType": "Demand Letter"},
        {"caseData": {"issue": "x"}},
        {"docType": "", "caseData": {"issue": "x"}},
        {"docType": "Demand Letter", "caseData": None},
    ],
)
def test_generate_document_requires_fields(client, payload):
    response = client.post("/api/generate-document", json=payload)
    assert response.status_code == 400
    assert response.json() == {"error": "Document type and case data are required"}


def test_generate_document_malformed_case_data(client):
    response = client.post(
        "/api/generate-document",
        json={"docType": "Demand Letter", "caseData": {"issue": "x"}},
    )
    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "Document generation failed"
    assert body["details"]


def test_cors_headers(client):
    response = client.get("/api/health", headers={"Origin": "http://example.com"})
    assert response.headers["access-control-allow-origin"] == "*"


def test_generate_document_rejects_mismatched_total(client):
    case_data = client.post(
        "/api/analyze-case", json={"userInput": "I was hurt in an accident"}
    ).json()
    case_data["damages"]["total"] = 999999

    response = client.post(
        "/api/generate-document",
        json={"docType": "Demand Letter", "caseData": case_data},
    )
    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "Document generation failed"
    assert "does not match" in body["details"]
