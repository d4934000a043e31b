from .common import BASE_URLS, Environment, PrintColor, SortType, Speed
from .requests import (
    DEFAULT_PREVIEW_SIZE,
    NO_LIMIT,
    FaxQuote,
    FilterValue,
    ListQuery,
    PostQuote,
    PreviewQuery,
    SendOptions,
    UploadOptions,
    serialize_filters,
)
from .responses import (
    PDF_CONTENT_TYPE,
    PNG_CONTENT_TYPE,
    BinaryResult,
    JsonResult,
    ServiceResponse,
    sniff_content_type,
)


__all__ = [
    "BASE_URLS",
    "DEFAULT_PREVIEW_SIZE",
    "NO_LIMIT",
    "PDF_CONTENT_TYPE",
    "PNG_CONTENT_TYPE",
    "BinaryResult",
    "Environment",
    "FaxQuote",
    "FilterValue",
    "JsonResult",
    "ListQuery",
    "PostQuote",
    "PreviewQuery",
    "PrintColor",
    "SendOptions",
    "ServiceResponse",
    "SortType",
    "Speed",
    "UploadOptions",
    "serialize_filters",
    "sniff_content_type",
]
