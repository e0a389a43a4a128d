from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from api.main import create_app
from config import Settings


class _StubResponse:
    def __init__(self, payload):
        self._payload = payload

    def raise_for_status(self) -> None:
        return None

    def json(self):
        return self._payload


@pytest.fixture
def client():
    with TestClient(create_app(Settings(value_source_url=""))) as c:
        yield c


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_postfix_endpoint(client):
    response = client.post("/postfix", json={"expression": "3 + 2 * (5 - x)"})

    assert response.status_code == 200
    body = response.json()
    assert body["postfix"] == "3 2 5 x - * +"
    assert body["tokens"][3] == {"kind": "identifier", "text": "x"}


def test_postfix_endpoint_reports_calculator_errors_as_422(client):
    response = client.post("/postfix", json={"expression": "(1 + 2"})

    assert response.status_code == 422
    assert response.json()["kind"] == "malformed_expression"
    assert response.json()["code"] == "1001"


def test_calculate_endpoint(client):
    response = client.post(
        "/calculate",
        json={"expression": "3 + 2 * (5 - x)", "variables": {"x": 2}},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["ok"] is True
    assert body["value"] == 9.0
    assert body["postfix"] == "3 2 5 x - * +"


def test_calculate_endpoint_unbound_variable_is_an_outcome(client):
    response = client.post("/calculate", json={"expression": "x * 2"})

    assert response.status_code == 200
    body = response.json()
    assert body["ok"] is False
    assert body["error"]["kind"] == "unbound_variable"


def test_evaluate_endpoint_division_by_zero(client):
    response = client.post("/evaluate", json={"postfix": "a 0 /", "variables": {"a": 3}})

    body = response.json()
    assert body["ok"] is False
    assert body["error"]["kind"] == "division_by_zero"
    assert body["postfix"] == "a 0 /"


def test_evaluate_endpoint_too_many_operands(client):
    response = client.post("/evaluate", json={"postfix": "3 4"})

    body = response.json()
    assert body["ok"] is False
    assert body["error"]["kind"] == "malformed_postfix"


def test_expression_length_limit():
    app = create_app(Settings(value_source_url="", max_expression_length=5))
    with TestClient(app) as c:
        response = c.post("/calculate", json={"expression": "1 + 2 + 3"})

    assert response.status_code == 413


def test_missing_variables_come_from_value_source(monkeypatch):
    requested = []

    def _fake_post(url, json, timeout):
        requested.append(json["name"])
        return _StubResponse({"value": 10})

    monkeypatch.setattr("adapters.variable_provider.http_provider.httpx.post", _fake_post)

    app = create_app(Settings(value_source_url="https://example.test/value"))
    with TestClient(app) as c:
        response = c.post(
            "/calculate",
            json={"expression": "x + y", "variables": {"x": 1}},
        )

    assert response.json()["value"] == 11.0
    assert requested == ["y"]


def test_calculate_endpoint_sin_of_infinity_is_an_outcome(client):
    response = client.post("/calculate", json={"expression": "s(1" + "0" * 400 + ")"})

    assert response.status_code == 200
    body = response.json()
    assert body["ok"] is False
    assert body["error"]["kind"] == "domain_error"


def test_calculate_endpoint_overflow_is_an_outcome(client):
    response = client.post("/calculate", json={"expression": "1" + "0" * 400 + " * 2"})

    assert response.status_code == 200
    body = response.json()
    assert body["ok"] is False
    assert body["value"] is None
    assert body["error"]["kind"] == "domain_error"


def test_evaluate_endpoint_respects_length_limit():
    app = create_app(Settings(value_source_url="", max_expression_length=5))
    with TestClient(app) as c:
        response = c.post("/evaluate", json={"postfix": "1 2 + 3 +"})

    assert response.status_code == 413
