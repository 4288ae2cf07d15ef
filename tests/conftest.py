"""
Shared fixtures.

Nothing here touches the network: sources get their bodies from
FakeResponse objects or from a patched http_get.
"""

import pytest

from subfind.core import console
from subfind.core.errors import TransportError
from subfind.passive.base_tool import BaseTool


class FakeResponse:
    def __init__(self, status_code=200, text=""):
        self.status_code = status_code
        self.text = text


class FakeTool(BaseTool):
    """Source that returns canned names, or raises"""

    def __init__(self, name, names=(), error=None, fail_after=None):
        super().__init__({})
        self.name = name
        self.names = list(names)
        self.error = error
        self.fail_after = fail_after
        self.calls = []

    def fetch(self, domain):
        self.calls.append(domain)
        if self.error is not None and self.fail_after is None:
            raise self.error
        for i, name in enumerate(self.names):
            if self.fail_after is not None and i == self.fail_after:
                raise self.error
            yield name


@pytest.fixture(autouse=True)
def quiet_console():
    console.set_verbose(False)
    yield
    console.set_verbose(False)


@pytest.fixture
def make_tool():
    return FakeTool


@pytest.fixture
def error_log():
    """on_error callback that records (tool_name, exception)"""
    errors = []

    def record(tool_name, error):
        errors.append((tool_name, error))

    record.errors = errors
    return record


@pytest.fixture
def three_tools():
    return [
        FakeTool("one", ["a.example.com", "b.example.com"]),
        FakeTool("two", error=TransportError("HTTP 503: unavailable")),
        FakeTool("three", ["c.example.com", "d.example.com"]),
    ]


@pytest.fixture
def fake_body(monkeypatch):
    """Make every source read the given body (or raise) instead of doing a GET"""
    requested = []

    def install(body):
        def fake_http_get(url, **kwargs):
            requested.append(url)
            if isinstance(body, Exception):
                raise body
            if isinstance(body, list):
                return body.pop(0)
            return body

        monkeypatch.setattr("subfind.passive.base_tool.http_get", fake_http_get)
        return requested

    return install
