"""Tests for the HTTP fetch helper."""

import pytest
import requests

from subfind.core.errors import TransportError
from subfind.core.http import http_get
from tests.conftest import FakeResponse


class TestHttpGet:

    def test_returns_body(self, monkeypatch):
        calls = []

        def fake_get(url, **kwargs):
            calls.append((url, kwargs))
            return FakeResponse(200, "body")

        monkeypatch.setattr("subfind.core.http.requests.get", fake_get)

        assert http_get("https://x.test/", timeout=7, headers={"User-Agent": "t"}) == "body"
        assert calls[0][1]["timeout"] == 7
        assert calls[0][1]["headers"] == {"User-Agent": "t"}

    def test_non_2xx_is_transport_error(self, monkeypatch):
        monkeypatch.setattr("subfind.core.http.requests.get",
                            lambda url, **kwargs: FakeResponse(503, "Service\nUnavailable"))

        with pytest.raises(TransportError, match="HTTP 503: Service Unavailable"):
            http_get("https://x.test/")

    def test_connection_error(self, monkeypatch):
        def fake_get(url, **kwargs):
            raise requests.exceptions.ConnectionError("refused")

        monkeypatch.setattr("subfind.core.http.requests.get", fake_get)

        with pytest.raises(TransportError, match="Request failed"):
            http_get("https://x.test/")

    def test_timeout(self, monkeypatch):
        def fake_get(url, **kwargs):
            raise requests.exceptions.ReadTimeout()

        monkeypatch.setattr("subfind.core.http.requests.get", fake_get)

        with pytest.raises(TransportError, match="Timeout after 3s"):
            http_get("https://x.test/", timeout=3)

