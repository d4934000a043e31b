from __future__ import annotations
from typing import Any, Protocol


class IResponse(Protocol):
    status_code: int | None
    content: bytes | None


class ISession(Protocol):
    def request(
        self,
        method: str,
        url: str,
        *,
        data: Any = None,
        files: Any = None,
        headers: dict[str, str] | None = None,
        timeout: int | None = None,
    ) -> IResponse: ...

    def close(self) -> None: ...
