from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from robostats.services.statbotics_client import StatboticsClient

BASE = "https://api.statbotics.io"


class Recorder:
    """Canned upstream: answers every request with one status/body and keeps the URLs."""

    def __init__(self, body: Any = None, status: int = 200) -> None:
        self.body = body
        self.status = status
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.body, (bytes, str)):
            return httpx.Response(self.status, content=self.body)
        return httpx.Response(self.status, json=self.body)

    @property
    def urls(self) -> list[str]:
        return [str(r.url) for r in self.requests]

    def client(self) -> StatboticsClient:
        return StatboticsClient(
            base_url=BASE,
            user_agent="statbotics-app/1.0",
            transport=httpx.MockTransport(self.handler),
        )


@pytest.fixture
def upstream() -> Callable[..., Recorder]:
    def make(body: Any = None, status: int = 200) -> Recorder:
        return Recorder(body, status)

    return make
