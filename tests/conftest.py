"""Shared fixtures: a recording in-memory session instead of a real transport."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

import pytest

from pingen_client import PingenClient


TOKEN = "secret-token"
PRODUCTION_URL = "https://api.pingen.com"


@dataclass
class FakeResponse:
    content: bytes
    status_code: int = 200


class FakeSession:
    def __init__(self) -> None:
        self.responses: list[FakeResponse] = []
        self.error: Exception | None = None
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def reply(self, content: bytes, status_code: int = 200) -> None:
        self.responses.append(FakeResponse(content=content, status_code=status_code))

    def reply_json(self, payload: Any, status_code: int = 200) -> None:
        self.reply(json.dumps(payload).encode(), status_code=status_code)

    def request(
        self,
        method: str,
        url: str,
        *,
        data: Any = None,
        files: Any = None,
        headers: dict[str, str] | None = None,
        timeout: int | None = None,
    ) -> FakeResponse:
        self.calls.append(
            {
                "method": method,
                "url": url,
                "data": data,
                "files": files,
                "headers": headers,
                "timeout": timeout,
            },
        )
        if self.error is not None:
            raise self.error
        if self.responses:
            return self.responses.pop(0)
        return FakeResponse(content=b'{"error": false}')

    def close(self) -> None:
        self.closed = True

    @property
    def last_call(self) -> dict[str, Any]:
        return self.calls[-1]


def endpoint_url(endpoint: str, base_url: str = PRODUCTION_URL) -> str:
    return f"{base_url}/{endpoint}/token/{TOKEN}"


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(session) -> PingenClient:
    return PingenClient(TOKEN, session=session)
