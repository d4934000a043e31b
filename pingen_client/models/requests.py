from collections.abc import Mapping
from typing import Any
from urllib.parse import quote_plus

from pydantic import BaseModel, Field

from .common import PrintColor, SortType, Speed


FilterValue = str | int | float

NO_LIMIT = 0
DEFAULT_PREVIEW_SIZE = 595


def serialize_filters(filters: Mapping[str, FilterValue] | None) -> str:
    """Render a filter set as a path suffix: ``/filter/name1:value1;name2:value2``.

    An empty or missing filter set produces no suffix at all.
    """
    if not filters:
        return ""
    pairs = ";".join(f"{name}:{value}" for name, value in filters.items())
    return f"/filter/{pairs}"


class ListQuery(BaseModel):
    limit: int = Field(NO_LIMIT, ge=0)
    page: int = Field(1, ge=1)
    sort: str = Field("date", min_length=1)
    sort_type: SortType = SortType.DESC
    filters: dict[str, FilterValue] = Field(default_factory=dict)

    def to_path(self, resource: str) -> str:
        path = (
            f"{resource}/list/limit/{self.limit}/page/{self.page}"
            f"/sort/{self.sort}/sorttype/{self.sort_type.value}"
        )
        return path + serialize_filters(self.filters)


class PreviewQuery(BaseModel):
    page: int = Field(1, ge=1)
    size: int = Field(DEFAULT_PREVIEW_SIZE, ge=1)

    def to_path(self, resource: str, resource_id: int) -> str:
        return f"{resource}/preview/id/{resource_id}/page/{self.page}/size/{self.size}"


class SendOptions(BaseModel):
    speed: Speed = Speed.PRIORITY
    color: PrintColor = PrintColor.COLOR

    def model_dump(self, **_: Any) -> dict[str, Any]:
        return {"speed": self.speed.value, "color": self.color.value}


class UploadOptions(SendOptions):
    send: bool = False

    def model_dump(self, **kwargs: Any) -> dict[str, Any]:
        # the service expects the send flag as 0/1
        return {"send": int(self.send), **super().model_dump(**kwargs)}


class FaxQuote(BaseModel):
    number: str = Field(..., min_length=1)
    pages: int = Field(1, ge=1)
    documents: int = Field(1, ge=1)
    currency: str = "CHF"

    def to_path(self) -> str:
        return (
            f"calculator/fax/number/{quote_plus(self.number)}"
            f"/pages/{self.pages}/documents/{self.documents}/currency/{self.currency}"
        )


class PostQuote(BaseModel):
    country: str = "CH"
    speed: Speed = Speed.PRIORITY
    print_color: PrintColor = PrintColor.COLOR
    documents: int = Field(1, ge=1)
    pages_normal: int = Field(1, ge=0)
    pages_esr: int = Field(0, ge=0)
    plan: int = 1
    currency: str = "CHF"

    def to_path(self) -> str:
        return (
            f"calculator/get/country/{self.country}/print/{self.print_color.value}"
            f"/speed/{self.speed.value}/plan/{self.plan}/documents/{self.documents}"
            f"/currency/{self.currency}/pages_normal/{self.pages_normal}/pages_esr/{self.pages_esr}"
        )
