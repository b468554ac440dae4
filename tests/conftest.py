"""Pytest fixtures for cf-app-lister tests."""

import json

import pytest

from cf_app_lister.apps.errors import UpstreamCallFailed
from cf_app_lister.config import Settings


def apps_page(apps: list[tuple[str, str]], next_url: str | None = None) -> str:
    """Build a v2/apps JSON page from (name, state) pairs."""
    page = {
        "resources": [
            {"metadata": {"guid": f"guid-{name}"}, "entity": {"name": name, "state": state}}
            for name, state in apps
        ],
    }
    if next_url is not None:
        page["next_url"] = next_url
    return json.dumps(page)


SAMPLE_APPS = [
    ("app1", "STARTED"),
    ("app2", "STARTED"),
    ("app3", "STOPPED"),
]


class FakeExecutor:
    """In-memory stand-in for the cf CLI.

    Serves ``payloads`` in order (repeating the last one) and records every
    path requested. ``fail_on_call`` makes the n-th API call (1-based) fail.
    """

    def __init__(
        self,
        payloads: list[str] | None = None,
        endpoint: str = "https://api.example.com",
        endpoint_error: str | None = None,
        fail_on_call: int | None = None,
        call_error: str = "something went wrong",
    ):
        self.payloads = payloads or ["{}"]
        self.endpoint = endpoint
        self.endpoint_error = endpoint_error
        self.fail_on_call = fail_on_call
        self.call_error = call_error
        self.paths: list[str] = []

    async def get_api_endpoint(self) -> str:
        if self.endpoint_error:
            raise UpstreamCallFailed(self.endpoint_error)
        return self.endpoint

    async def invoke_api(self, path: str) -> str:
        self.paths.append(path)
        if self.fail_on_call is not None and len(self.paths) == self.fail_on_call:
            raise UpstreamCallFailed(self.call_error)
        index = min(len(self.paths), len(self.payloads)) - 1
        return self.payloads[index]


@pytest.fixture
def sample_page() -> str:
    """Single page of three apps with no continuation."""
    return apps_page(SAMPLE_APPS)


@pytest.fixture
def two_pages() -> list[str]:
    """The sample apps followed by a second page adding app4."""
    return [
        apps_page(SAMPLE_APPS, next_url="v2/apps?page=2"),
        apps_page([("app4", "STARTED")]),
    ]


@pytest.fixture
def settings(monkeypatch) -> Settings:
    """Settings isolated from the caller's environment and .env file."""
    for name in (
        "CF_APP_LISTER_CF_BINARY",
        "CF_APP_LISTER_CF_HOME",
        "CF_APP_LISTER_COMMAND_TIMEOUT",
        "CF_APP_LISTER_MAX_PAGES",
        "CF_APP_LISTER_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return Settings(_env_file=None, log_level="CRITICAL")
