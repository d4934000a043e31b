from typing import Any, Literal

from pydantic import BaseModel


PDF_CONTENT_TYPE = "application/pdf"
PNG_CONTENT_TYPE = "image/png"


class JsonResult(BaseModel):
    kind: Literal["json"] = "json"
    data: dict[str, Any]

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)


class BinaryResult(BaseModel):
    kind: Literal["binary"] = "binary"
    content: bytes
    content_type: Literal["application/pdf", "image/png"]

    @property
    def is_pdf(self) -> bool:
        return self.content_type == PDF_CONTENT_TYPE

    @property
    def is_png(self) -> bool:
        return self.content_type == PNG_CONTENT_TYPE


ServiceResponse = JsonResult | BinaryResult


def sniff_content_type(body: bytes) -> str | None:
    if body[:4] == b"%PDF":
        return PDF_CONTENT_TYPE
    if body[1:4] == b"PNG":
        return PNG_CONTENT_TYPE
    return None
