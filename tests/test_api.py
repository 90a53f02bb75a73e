# =============================================================================
# tests/test_api.py - API Endpoint Tests
# =============================================================================
# Covers:
#   - GET  /api/info         application info
#   - POST /api/echo         JSON, form and unsupported bodies
#   - GET  /api/add/{a}/{b}  addition, validation and overflow
#
# Run with: pytest tests/test_api.py -v
# =============================================================================

import platform

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app


# =============================================================================
# Info
# =============================================================================

class TestInfo:
    """Tests for GET /api/info."""

    def test_returns_application_info(self, client):
        """Test all info fields are present with camelCase keys."""
        response = client.get("/api/info")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "DevOps Python App"
        assert data["version"] == "1.0.0"
        assert data["environment"] == "test"
        assert data["nodeVersion"] == f"v{platform.python_version()}"
        assert "node_version" not in data

    def test_environment_defaults_to_development(self, monkeypatch):
        """Test the environment falls back when no variable is set."""
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        monkeypatch.delenv("NODE_ENV", raising=False)

        with TestClient(create_app(Settings(_env_file=None))) as client:
            data = client.get("/api/info").json()

        assert data["environment"] == "development"

    def test_environment_from_node_env(self, monkeypatch):
        """Test NODE_ENV is accepted as the environment name."""
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        monkeypatch.setenv("NODE_ENV", "production")

        with TestClient(create_app(Settings(_env_file=None))) as client:
            data = client.get("/api/info").json()

        assert data["environment"] == "production"


# =============================================================================
# Echo
# =============================================================================

class TestEcho:
    """Tests for POST /api/echo."""

    def test_echoes_json_body(self, client, echo_payload):
        """Test the JSON body comes back verbatim."""
        response = client.post("/api/echo", json=echo_payload)

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Echo endpoint"
        assert data["receivedData"] == echo_payload
        assert data["timestamp"].endswith("Z")

    def test_echoes_nested_json(self, client):
        """Test nested structures and non-object JSON values."""
        payload = {"user": {"name": "ann", "tags": ["a", "b"]}, "active": True, "score": None}

        assert client.post("/api/echo", json=payload).json()["receivedData"] == payload
        assert client.post("/api/echo", json=[1, 2, 3]).json()["receivedData"] == [1, 2, 3]
        assert client.post("/api/echo", json="hello").json()["receivedData"] == "hello"

    def test_echoes_form_body(self, client):
        """Test URL-encoded forms are decoded into a dict."""
        response = client.post(
            "/api/echo",
            data={"name": "ann", "user[role]": "admin", "tags[]": ["a", "b"]},
        )

        assert response.status_code == 200
        assert response.json()["receivedData"] == {
            "name": "ann",
            "user": {"role": "admin"},
            "tags": ["a", "b"],
        }

    def test_echoes_indexed_form_fields_as_list(self, client):
        """Test a[0]=x&a[1]=y arrives as a list."""
        response = client.post(
            "/api/echo",
            content=b"a%5B0%5D=x&a%5B1%5D=y",
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )

        assert response.status_code == 200
        assert response.json()["receivedData"] == {"a": ["x", "y"]}

    def test_empty_body_echoes_empty_object(self, client):
        """Test a POST without a body echoes {}."""
        response = client.post("/api/echo")

        assert response.status_code == 200
        assert response.json()["receivedData"] == {}

    def test_unsupported_content_type_echoes_empty_object(self, client):
        """Test bodies of other media types are ignored."""
        response = client.post(
            "/api/echo",
            content=b"just some text",
            headers={"Content-Type": "text/plain"},
        )

        assert response.status_code == 200
        assert response.json()["receivedData"] == {}

    def test_get_is_not_routed(self, client):
        """Test echo only answers POST."""
        response = client.get("/api/echo")

        assert response.status_code == 404


# =============================================================================
# Calculator
# =============================================================================

class TestAdd:
    """Tests for GET /api/add/{a}/{b}."""

    def test_adds_integers(self, client):
        """Test 5 + 3."""
        response = client.get("/api/add/5/3")

        assert response.status_code == 200
        data = response.json()
        assert data["operation"] == "addition"
        assert data["a"] == 5
        assert data["b"] == 3
        assert data["result"] == 8

    def test_integral_values_have_no_fraction(self, client):
        """Test whole numbers are written as 5, not 5.0."""
        response = client.get("/api/add/5/3")

        assert '"a":5,' in response.text
        assert '"result":8}' in response.text
        assert isinstance(response.json()["result"], int)

    def test_adds_decimals(self, client):
        """Test 5.5 + 3.2 is close to 8.7."""
        response = client.get("/api/add/5.5/3.2")

        assert response.status_code == 200
        assert response.json()["result"] == pytest.approx(8.7, abs=0.1)

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            ("-2", "7", 5.0),
            ("0.1", "0.2", 0.1 + 0.2),
            ("1e3", "1", 1001.0),
            (".5", "+5.", 5.5),
        ],
    )
    def test_uses_double_precision(self, client, a, b, expected):
        """Test the sum matches Python float addition exactly."""
        response = client.get(f"/api/add/{a}/{b}")

        assert response.status_code == 200
        assert response.json()["result"] == expected

    @pytest.mark.parametrize(
        "a, b",
        [
            ("abc", "123"),
            ("123", "abc"),
            ("5abc", "3"),
            ("NaN", "1"),
            ("Infinity", "1"),
            ("1e400", "1"),
            ("0x10", "1"),
            ("\u0665", "3"),
            ("3", "\uff15"),
        ],
    )
    def test_rejects_invalid_numbers(self, client, a, b):
        """Test non-numeric operands return 400."""
        response = client.get(f"/api/add/{a}/{b}")

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid numbers provided"}

    def test_overflowing_sum_is_null(self, client):
        """Test a sum past the double range reports a null result."""
        response = client.get("/api/add/1e308/1e308")

        assert response.status_code == 200
        assert response.json()["result"] is None

    def test_repeated_requests_are_identical(self, client):
        """Test the same inputs always give the same response."""
        first = client.get("/api/add/2.5/4")
        second = client.get("/api/add/2.5/4")

        assert first.status_code == second.status_code == 200
        assert first.json() == second.json()
