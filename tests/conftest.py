"""Shared fixtures — a JulesClient wired to an in-memory httpx transport."""

import json
from typing import Any, Callable, Optional

import httpx
import pytest

from jules_api import JulesClient

API_KEY = "test-api-key"
BASE_URL = "https://jules.example.com/v1alpha"


class FakeAPI:
    """Queue canned responses and record every request the client makes."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response] = []
        self._router: Optional[Callable[[httpx.Request], httpx.Response]] = None

    def add(self, status: int = 200, json_body: Any = None, text: Optional[str] = None) -> "FakeAPI":
        if text is not None:
            self._responses.append(httpx.Response(status, text=text))
        elif json_body is not None:
            self._responses.append(httpx.Response(status, json=json_body))
        else:
            self._responses.append(httpx.Response(status))
        return self

    def route(self, router: Callable[[httpx.Request], httpx.Response]) -> "FakeAPI":
        self._router = router
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._router is not None:
            return self._router(request)
        if not self._responses:
            raise AssertionError(f"Unexpected request: {request.method} {request.url}")
        return self._responses.pop(0)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)

    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in ("JULES_API_KEY", "JULES_BASE_URL", "JULES_TIMEOUT"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def api() -> FakeAPI:
    return FakeAPI()


@pytest.fixture
def client(api: FakeAPI):
    c = JulesClient(api_key=API_KEY, base_url=BASE_URL, transport=httpx.MockTransport(api.handler))
    yield c
    c.close()
