import json
from abc import ABC, abstractmethod
from pathlib import Path
from types import TracebackType
from typing import Any, Self

import niquests
import structlog

from pingen_client.exceptions import DecodingError, TransportError
from pingen_client.interfaces import IResponse, ISession
from pingen_client.models import BinaryResult, JsonResult, ServiceResponse, sniff_content_type


logger = structlog.get_logger()

JSON_HEADERS = {"Content-Type": "application/json"}


class BaseClient(ABC):
    def __init__(
        self,
        base_url: str,
        service_name: str,
        timeout: int = 30,
        session: ISession | None = None,
        send_empty_body: bool = True,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.send_empty_body = send_empty_body
        self._session = session
        self._owned_session = session is None

        self.logger = logger.bind(
            service=service_name,
            base_url=self.base_url,
        )

    def __enter__(self) -> Self:
        if self._session is None:
            self._session = niquests.Session()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._owned_session and self._session:
            self._session.close()
            self._session = None

    @abstractmethod
    def _build_url(self, endpoint: str) -> str:
        """Return the absolute URL for an endpoint, credentials included."""

    @abstractmethod
    def _handle_response_errors(self, payload: dict[str, Any]) -> None:
        """Raise if the decoded payload reports a failure."""

    def _redact(self, text: str) -> str:
        return text

    def execute(
        self,
        method: str,
        endpoint: str,
        body: dict[str, Any] | None = None,
        file_path: str | Path | None = None,
    ) -> ServiceResponse:
        """Send one request and interpret the response.

        Uploads are always sent as a multipart POST, whatever ``method`` says.
        PDF and PNG bodies are returned verbatim as ``BinaryResult``; anything
        else must be a JSON object and comes back as ``JsonResult``.
        """
        if self._session is None:
            raise RuntimeError("Client must be used as context manager")

        method = method.upper()
        endpoint = endpoint.strip("/")
        if file_path is not None:
            method = "POST"
        request_kwargs = self._prepare_request(method, body, file_path)

        self.logger.debug(
            "making_request",
            method=method,
            endpoint=endpoint,
            has_data=bool(body),
            has_file=file_path is not None,
        )

        try:
            response = self._session.request(
                method,
                self._build_url(endpoint),
                timeout=self.timeout,
                **request_kwargs,
            )

        except niquests.exceptions.Timeout as e:
            error = self._redact(str(e))
            self.logger.error("request_timeout", method=method, endpoint=endpoint, error=error)
            raise TransportError(f"Request timeout: {error}") from e

        except niquests.exceptions.RequestException as e:
            error = self._redact(str(e))
            self.logger.error(
                "request_exception",
                method=method,
                endpoint=endpoint,
                error=error,
            )
            raise TransportError(f"Request failed: {error}") from e

        return self._parse_response(method, endpoint, response)

    def _prepare_request(
        self,
        method: str,
        body: dict[str, Any] | None,
        file_path: str | Path | None,
    ) -> dict[str, Any]:
        if file_path is not None:
            path = Path(file_path)
            return {
                "data": {"data": json.dumps(body or {})},
                "files": {"file": (path.name, path.read_bytes())},
                "headers": None,
            }

        if method == "GET" or (not body and not self.send_empty_body):
            return {"data": None, "files": None, "headers": None}

        return {"data": json.dumps(body or {}), "files": None, "headers": JSON_HEADERS}

    def _parse_response(self, method: str, endpoint: str, response: IResponse) -> ServiceResponse:
        content = response.content or b""

        content_type = sniff_content_type(content)
        if content_type is not None:
            self.logger.debug(
                "request_successful",
                method=method,
                endpoint=endpoint,
                status_code=response.status_code,
                binary=True,
            )
            return BinaryResult(content=content, content_type=content_type)

        try:
            payload = json.loads(content)
        except ValueError as e:
            self.logger.error(
                "decoding_error",
                method=method,
                endpoint=endpoint,
                status_code=response.status_code,
                size=len(content),
            )
            raise DecodingError(
                f"Response with status {response.status_code} is neither a document nor valid JSON",
                status_code=response.status_code,
            ) from e

        if not isinstance(payload, dict):
            self.logger.error(
                "decoding_error",
                method=method,
                endpoint=endpoint,
                status_code=response.status_code,
                payload_type=type(payload).__name__,
            )
            raise DecodingError(
                f"Expected a JSON object, got {type(payload).__name__}",
                status_code=response.status_code,
            )

        self._handle_response_errors(payload)

        self.logger.debug(
            "request_successful",
            method=method,
            endpoint=endpoint,
            status_code=response.status_code,
            binary=False,
        )
        return JsonResult(data=payload)
