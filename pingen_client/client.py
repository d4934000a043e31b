from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Self

from pingen_client.base_client import BaseClient
from pingen_client.exceptions import ConfigurationError, ServiceError
from pingen_client.interfaces import ISession
from pingen_client.models import (
    BASE_URLS,
    DEFAULT_PREVIEW_SIZE,
    NO_LIMIT,
    Environment,
    FaxQuote,
    FilterValue,
    ListQuery,
    PostQuote,
    PreviewQuery,
    PrintColor,
    SendOptions,
    ServiceResponse,
    SortType,
    Speed,
    UploadOptions,
)
from pingen_client.settings import PingenSettings, get_settings


def resolve_environment(value: Environment | int | str) -> Environment:
    """Map an ``Environment``, its value (1/2) or its name to a member."""
    if isinstance(value, Environment):
        return value
    if isinstance(value, str):
        name = value.strip()
        if not (name.isascii() and name.isdigit()):
            try:
                return Environment[name.upper()]
            except KeyError as e:
                raise ConfigurationError(f"The specified environment does not exist: {value!r}") from e
        value = int(name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"The specified environment does not exist: {value!r}")
    try:
        return Environment(value)
    except ValueError as e:
        raise ConfigurationError(f"The specified environment does not exist: {value!r}") from e


class PingenClient(BaseClient):
    def __init__(
        self,
        token: str,
        environment: Environment | int | str = Environment.PRODUCTION,
        timeout: int = 30,
        session: ISession | None = None,
        send_empty_body: bool = True,
    ) -> None:
        if not token:
            raise ConfigurationError("An access token is required")
        if timeout <= 0:
            raise ConfigurationError(f"Timeout must be positive, got {timeout}")

        self.environment = resolve_environment(environment)
        self._token = token

        super().__init__(
            base_url=BASE_URLS[self.environment],
            service_name="pingen_client",
            timeout=timeout,
            session=session,
            send_empty_body=send_empty_body,
        )

    @classmethod
    def from_settings(cls, settings: PingenSettings | None = None, session: ISession | None = None) -> Self:
        settings = settings or get_settings()
        return cls(
            token=settings.token,
            environment=settings.environment,
            timeout=settings.timeout,
            session=session,
        )

    # Documents

    def document_list(
        self,
        limit: int = NO_LIMIT,
        page: int = 1,
        sort: str = "date",
        sort_type: SortType | str = SortType.DESC,
        filters: Mapping[str, FilterValue] | None = None,
    ) -> ServiceResponse:
        return self._list("document", limit, page, sort, sort_type, filters)

    def document_get(self, document_id: int) -> ServiceResponse:
        return self.execute("GET", f"document/get/id/{document_id}")

    def document_pdf(self, document_id: int) -> ServiceResponse:
        """Download the uploaded document as PDF."""
        return self.execute("GET", f"document/pdf/id/{document_id}")

    def document_preview(
        self,
        document_id: int,
        page: int = 1,
        size: int = DEFAULT_PREVIEW_SIZE,
    ) -> ServiceResponse:
        """Render one page of the document as PNG, ``size`` pixels wide."""
        query = PreviewQuery(page=page, size=size)
        return self.execute("GET", query.to_path("document", document_id))

    def document_delete(self, document_id: int) -> ServiceResponse:
        return self.execute("POST", f"document/delete/id/{document_id}")

    def document_send(
        self,
        document_id: int,
        speed: Speed = Speed.PRIORITY,
        color: PrintColor = PrintColor.COLOR,
    ) -> ServiceResponse:
        options = SendOptions(speed=speed, color=color)
        return self.execute("POST", f"document/send/id/{document_id}", options.model_dump())

    def document_upload(
        self,
        file_path: str | Path,
        send: bool = False,
        speed: Speed = Speed.PRIORITY,
        color: PrintColor = PrintColor.COLOR,
    ) -> ServiceResponse:
        """Upload a PDF; with ``send`` the service dispatches it right away."""
        options = UploadOptions(send=send, speed=speed, color=color)
        self.logger.debug(
            "uploading_document",
            document_name=Path(file_path).name,
            send=options.send,
        )
        return self.execute("POST", "document/upload", options.model_dump(), file_path=file_path)

    # Letters

    def letter_list(
        self,
        limit: int = NO_LIMIT,
        page: int = 1,
        sort: str = "date",
        sort_type: SortType | str = SortType.DESC,
        filters: Mapping[str, FilterValue] | None = None,
    ) -> ServiceResponse:
        return self._list("letter", limit, page, sort, sort_type, filters)

    def letter_get(self, letter_id: int) -> ServiceResponse:
        return self.execute("GET", f"letter/get/id/{letter_id}")

    def letter_add(self, data: dict[str, Any]) -> ServiceResponse:
        return self.execute("POST", "letter/add", data)

    def letter_edit(self, letter_id: int, data: dict[str, Any]) -> ServiceResponse:
        return self.execute("POST", f"letter/edit/id/{letter_id}", data)

    def letter_preview(
        self,
        letter_id: int,
        page: int = 1,
        size: int = DEFAULT_PREVIEW_SIZE,
    ) -> ServiceResponse:
        query = PreviewQuery(page=page, size=size)
        return self.execute("GET", query.to_path("letter", letter_id))

    def letter_pdf(self, letter_id: int) -> ServiceResponse:
        return self.execute("GET", f"letter/pdf/id/{letter_id}")

    def letter_send(
        self,
        letter_id: int,
        speed: Speed = Speed.PRIORITY,
        color: PrintColor = PrintColor.COLOR,
    ) -> ServiceResponse:
        options = SendOptions(speed=speed, color=color)
        return self.execute("POST", f"letter/send/id/{letter_id}", options.model_dump())

    def letter_delete(self, letter_id: int) -> ServiceResponse:
        return self.execute("POST", f"letter/delete/id/{letter_id}")

    # Sendings

    def send_list(
        self,
        limit: int = NO_LIMIT,
        page: int = 1,
        sort: str = "date",
        sort_type: SortType | str = SortType.DESC,
        filters: Mapping[str, FilterValue] | None = None,
    ) -> ServiceResponse:
        return self._list("send", limit, page, sort, sort_type, filters)

    def send_get(self, send_id: int) -> ServiceResponse:
        return self.execute("GET", f"send/get/id/{send_id}")

    def send_confirmation(self, send_id: int) -> ServiceResponse:
        """Download the dispatch confirmation as PDF."""
        return self.execute("GET", f"send/confirmation/id/{send_id}")

    def send_cancel(self, send_id: int) -> ServiceResponse:
        return self.execute("GET", f"send/cancel/id/{send_id}")

    def send_track(self, send_id: int) -> ServiceResponse:
        return self.execute("GET", f"send/track/id/{send_id}")

    def send_speed(self, countries: str | Iterable[str]) -> ServiceResponse:
        """Delivery times for one ISO2 country code or several of them."""
        if isinstance(countries, str):
            countries = [countries]
        return self.execute("GET", f"send/speed/countries/{','.join(countries)}")

    # Queue

    def queue_list(
        self,
        limit: int = NO_LIMIT,
        page: int = 1,
        sort: str = "date",
        sort_type: SortType | str = SortType.DESC,
        filters: Mapping[str, FilterValue] | None = None,
    ) -> ServiceResponse:
        return self._list("queue", limit, page, sort, sort_type, filters)

    def queue_get(self, queue_id: int) -> ServiceResponse:
        return self.execute("GET", f"queue/get/id/{queue_id}")

    def queue_cancel(self, queue_id: int, data: dict[str, Any] | None = None) -> ServiceResponse:
        return self.execute("POST", f"queue/cancel/id/{queue_id}", data)

    # Contacts

    def contact_list(
        self,
        limit: int = NO_LIMIT,
        page: int = 1,
        sort: str = "id",
        sort_type: SortType | str = SortType.DESC,
        filters: Mapping[str, FilterValue] | None = None,
    ) -> ServiceResponse:
        return self._list("contact", limit, page, sort, sort_type, filters)

    def contact_get(self, contact_id: int) -> ServiceResponse:
        return self.execute("GET", f"contact/get/id/{contact_id}")

    def contact_add(self, data: dict[str, Any]) -> ServiceResponse:
        return self.execute("POST", "contact/add", data)

    def contact_edit(self, contact_id: int, data: dict[str, Any]) -> ServiceResponse:
        return self.execute("POST", f"contact/edit/id/{contact_id}", data)

    def contact_delete(self, contact_id: int) -> ServiceResponse:
        return self.execute("POST", f"contact/delete/id/{contact_id}")

    # Calculator and account

    def calculator_fax(
        self,
        number: str,
        pages: int = 1,
        documents: int = 1,
        currency: str = "CHF",
    ) -> ServiceResponse:
        quote = FaxQuote(number=number, pages=pages, documents=documents, currency=currency)
        return self.execute("GET", quote.to_path())

    def calculator_post(  # noqa: PLR0913
        self,
        country: str = "CH",
        speed: Speed = Speed.PRIORITY,
        print_color: PrintColor = PrintColor.COLOR,
        documents: int = 1,
        pages_normal: int = 1,
        pages_esr: int = 0,
        plan: int = 1,
        currency: str = "CHF",
    ) -> ServiceResponse:
        quote = PostQuote(
            country=country,
            speed=speed,
            print_color=print_color,
            documents=documents,
            pages_normal=pages_normal,
            pages_esr=pages_esr,
            plan=plan,
            currency=currency,
        )
        return self.execute("GET", quote.to_path())

    def account_credit(self) -> ServiceResponse:
        return self.execute("GET", "account/credit")

    def account_plan(self) -> ServiceResponse:
        return self.execute("GET", "account/plan")

    def _list(  # noqa: PLR0913
        self,
        resource: str,
        limit: int,
        page: int,
        sort: str,
        sort_type: SortType | str,
        filters: Mapping[str, FilterValue] | None,
    ) -> ServiceResponse:
        query = ListQuery(
            limit=limit,
            page=page,
            sort=sort,
            sort_type=sort_type,
            filters=dict(filters or {}),
        )
        return self.execute("GET", query.to_path(resource))

    def _build_url(self, endpoint: str) -> str:
        # the service authenticates through the path, so this URL is a secret
        return "/".join([self.base_url, endpoint, "token", self._token])

    def _redact(self, text: str) -> str:
        return text.replace(self._token, "***")

    def _handle_response_errors(self, payload: dict[str, Any]) -> None:
        if not payload.get("error"):
            return

        try:
            code = int(payload.get("errorcode", 0))
        except (TypeError, ValueError):
            code = 0
        message = str(payload.get("errormessage") or "")

        self.logger.error("service_error", code=code, error_message=message)
        raise ServiceError(code=code, message=message)
