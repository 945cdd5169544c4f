"""
Pytest configuration for telepage tests.

No test talks to the network: API and upload calls go through
httpx.MockTransport backed by FakeTelegraphApi.

Usage:
    pytest testing/
    pytest testing/test_parse.py -k markdown
"""

import json
from collections.abc import Generator
from typing import Any

import httpx
import pytest

from telepage.api import Telegraph
from telepage.config import TelegraphConfig
from telepage.logging import end_run, start_run


@pytest.fixture(autouse=True)
def logging_run(request: pytest.FixtureRequest) -> Generator[None, None, None]:
    """Start a logging run per test module so log files rotate at module boundaries."""
    test_path = request.node.nodeid.split("::")[0]  # e.g., "testing/test_parse.py"
    test_name = test_path.replace("/", "-").replace(".py", "")
    start_run(f"test-{test_name}")
    yield
    end_run()


class FakeTelegraphApi:
    """In-memory stand-in for api.telegra.ph.

    Each API method answers from `results`; an httpx.Response value is
    returned as is, a missing method answers ok=false.
    """

    def __init__(self, results: dict[str, Any] | None = None):
        self.results: dict[str, Any] = dict(results or {})
        self.calls: list[tuple[str, dict]] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        method = request.url.path.lstrip("/")
        payload = json.loads(request.content or b"{}")
        self.calls.append((method, payload))

        result = self.results.get(method)
        if isinstance(result, httpx.Response):
            return result
        if result is None:
            return httpx.Response(200, json={"ok": False, "error": "METHOD_NOT_FOUND"})
        return httpx.Response(200, json={"ok": True, "result": result})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    @property
    def methods(self) -> list[str]:
        return [method for method, _ in self.calls]

    def payload(self, method: str) -> dict:
        """Payload of the last call to method."""
        for called, payload in reversed(self.calls):
            if called == method:
                return payload
        raise AssertionError(f"{method} was never called; calls: {self.methods}")


@pytest.fixture
def telegraph_config() -> TelegraphConfig:
    """Config independent of the developer's environment."""
    return TelegraphConfig(
        access_token=None,
        api_root="https://api.telegra.ph",
        upload_url="https://telegra.ph/upload",
        timeout=5.0,
    )


@pytest.fixture
def fake_api() -> FakeTelegraphApi:
    return FakeTelegraphApi()


@pytest.fixture
def make_client(fake_api, telegraph_config):
    """Build a Telegraph client wired to fake_api."""

    def factory(access_token: str | None = None, **kwargs) -> Telegraph:
        return Telegraph(
            access_token,
            config=telegraph_config,
            transport=fake_api.transport,
            **kwargs,
        )

    return factory
