"""Tests for the HTTP API using FastAPI's TestClient."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from strictnum.api.app import create_app
from strictnum.core.config import AppSettings, FormatConfig, LocaleConfig, TxtConfig


def _settings(tmp_path, language="en", **format_overrides):
    return AppSettings(
        locale=LocaleConfig(language=language),
        txt=TxtConfig(app_path=str(tmp_path)),
        format=FormatConfig(**format_overrides),
    )


@pytest.fixture
def client(tmp_path):
    with TestClient(create_app(_settings(tmp_path))) as c:
        yield c


class TestHealth:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_ready_reports_language(self, client):
        assert client.get("/ready").json() == {"status": "ready", "language": "en"}


class TestToDb:
    def test_converts(self, client):
        resp = client.post("/numbers/to-db", json={"value": "1.234,56", "precision": 10, "scale": 2})
        assert resp.status_code == 200
        assert resp.json() == {"value": "1234.56"}

    def test_uses_configured_defaults(self, client):
        resp = client.post("/numbers/to-db", json={"value": "1 234,5"})
        assert resp.json() == {"value": "1234.50"}

    def test_empty_value_is_null(self, client):
        assert client.post("/numbers/to-db", json={"value": "  "}).json() == {"value": None}

    def test_rejected_number_returns_422(self, client):
        resp = client.post("/numbers/to-db", json={"value": "1234.56", "precision": 10, "scale": 2})
        assert resp.status_code == 422
        assert resp.json() == {
            "error": "DotDecimalNotSupported",
            "key": "err_format_number_dot_decimal_not_supported",
            "message": "Invalid number: Dot-decimal UI input is not supported. Use comma as decimal separator.",
        }

    def test_message_is_localized(self, tmp_path):
        with TestClient(create_app(_settings(tmp_path, language="da"))) as c:
            resp = c.post("/numbers/to-db", json={"value": "1,234", "precision": 10, "scale": 2})
        assert resp.status_code == 422
        assert resp.json()["error"] == "TooManyFractionDigits"
        assert resp.json()["message"] == "Ugyldigt tal. For mange decimaler. Maksimalt 2 decimaler er tilladt."


class TestFromDb:
    def test_renders_with_defaults(self, client):
        assert client.post("/numbers/from-db", json={"value": "1234.5"}).json() == {"value": "1.234,50"}

    def test_renders_with_explicit_separators(self, client):
        body = {"value": "1234567.8", "scale": 3, "thousands_sep": " ", "decimal_sep": "."}
        assert client.post("/numbers/from-db", json=body).json() == {"value": "1 234 567.800"}

    def test_empty_thousands_sep_is_respected(self, client):
        body = {"value": "1234.5", "thousands_sep": ""}
        assert client.post("/numbers/from-db", json=body).json() == {"value": "1234,50"}

    def test_configured_separators(self, tmp_path):
        settings = _settings(tmp_path, thousands_sep=" ", decimal_sep=",", scale=0)
        with TestClient(create_app(settings)) as c:
            assert c.post("/numbers/from-db", json={"value": "1234567"}).json() == {"value": "1 234 567"}

    def test_rejected_db_number_returns_422(self, client):
        resp = client.post("/numbers/from-db", json={"value": "1234.567", "scale": 2})
        assert resp.status_code == 422
        assert resp.json()["error"] == "DbTooManyFractionDigits"

    def test_invalid_separators_return_422(self, client):
        resp = client.post("/numbers/from-db", json={"value": "1", "thousands_sep": ",", "decimal_sep": ","})
        assert resp.status_code == 422
        assert resp.json()["error"] == "InvalidThousandsSep"
