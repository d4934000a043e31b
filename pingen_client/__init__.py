from .client import PingenClient, resolve_environment
from .exceptions import (
    ConfigurationError,
    DecodingError,
    PingenError,
    ServiceError,
    TransportError,
)
from .models import (
    BinaryResult,
    Environment,
    JsonResult,
    PrintColor,
    ServiceResponse,
    SortType,
    Speed,
)
from .settings import PingenSettings, get_settings


__all__ = [
    "BinaryResult",
    "ConfigurationError",
    "DecodingError",
    "Environment",
    "JsonResult",
    "PingenClient",
    "PingenError",
    "PingenSettings",
    "PrintColor",
    "ServiceError",
    "ServiceResponse",
    "SortType",
    "Speed",
    "TransportError",
    "get_settings",
    "resolve_environment",
]
