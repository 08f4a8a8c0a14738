"""Tests for the HTTP API layer."""

import json

import pytest
from fastapi.testclient import TestClient

from tool_agent.errors import RegistryConfigError
from tool_agent.main import create_app


@pytest.fixture
def client(settings, github_stub):
    app = create_app(settings, transport=github_stub.transport)
    with TestClient(app) as client:
        yield client


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_list_tools(client):
    response = client.get("/tools")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["responseType"] == "mixed"
    names = [tool["name"] for tool in body["data"]["tools"]]
    assert names[0] == "add"
    assert names[-1] == "listUserRepositories"


def test_list_tools_without_registry(settings):
    app = create_app(settings)
    client = TestClient(app)

    response = client.get("/tools")

    assert response.status_code == 500
    assert response.json()["error"]["message"] == "Failed to load tools configuration"


def test_add(client):
    response = client.post("/tools/add", json={"a": 2, "b": 3})
    assert response.status_code == 200
    assert response.json()["data"]["result"] == 5


def test_divide_by_zero(client):
    response = client.post("/tools/divide", json={"a": 10, "b": 0})

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "DIVISION_BY_ZERO"
    assert "Division by zero" in body["error"]["message"]


def test_unknown_tool(client):
    response = client.post("/tools/unknownThing", json={"x": 1})

    assert response.status_code == 404
    error = response.json()["error"]
    assert error["code"] == 404
    assert "unknownThing" in error["message"]
    assert "add" in error["details"]
    assert "listUserRepositories" in error["details"]


def test_github_requires_authorization(client, github_stub):
    response = client.post("/tools/listUserRepositories", json={})

    assert response.status_code == 401
    assert response.json()["error"]["code"] == 401
    assert github_stub.requests == []


def test_github_with_token(client, github_stub):
    response = client.post(
        "/tools/listUserRepositories",
        json={"per_page": 2},
        headers={"Authorization": "Bearer gh-token"},
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["message"] == "Found 2 repositories for authenticated user"
    assert data["repositories"][1]["language"] == "Unknown"
    assert data["repositories"][1]["description"] is None
    assert github_stub.requests[0].headers["User-Agent"] == "Test-Agent/1.0"


def test_github_invalid_token(client, github_stub):
    github_stub.respond(401)
    response = client.post(
        "/tools/listUserRepositories",
        json={},
        headers={"Authorization": "Bearer expired"},
    )
    assert response.status_code == 401
    assert response.json()["error"]["message"] == "Invalid or expired GitHub token"


def test_empty_body_is_treated_as_empty_object(client):
    response = client.post("/tools/sqrt")
    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Missing required parameter: number"


def test_invalid_json_body(client):
    response = client.post(
        "/tools/add",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Request body must be valid JSON"


def test_malformed_catalog_aborts_startup(tmp_path, settings, github_stub):
    path = tmp_path / "tools.json"
    path.write_text(json.dumps([{"name": "add", "description": "Add"}]), encoding="utf-8")
    settings.tools_config_path = path

    app = create_app(settings, transport=github_stub.transport)
    with pytest.raises(RegistryConfigError):
        with TestClient(app):
            pass
