import logging
import re
from functools import partial
from logging import getLevelNamesMapping
from typing import Any

import structlog
import ujson
from structlog.typing import EventDict, Processor, WrappedLogger

from pingen_client.settings import PingenSettings


# request URLs end in /token/<access token>
TOKEN_SEGMENT = re.compile(r"(/token/)[^/\s'\"?#]+")
REDACTED = "***"


def scrub_token(value: Any) -> Any:
    if isinstance(value, str):
        return TOKEN_SEGMENT.sub(rf"\g<1>{REDACTED}", value)
    if isinstance(value, dict):
        return {key: scrub_token(item) for key, item in value.items()}
    if isinstance(value, list):
        return [scrub_token(item) for item in value]
    if isinstance(value, tuple):
        return tuple(scrub_token(item) for item in value)
    return value


def redact_access_token(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Mask the token segment of any URL in the event, tracebacks included.

    Must run after exception rendering so that formatted tracebacks and frame
    locals are plain data by the time they are scrubbed.
    """
    return {key: scrub_token(value) for key, value in event_dict.items()}


def build_processors(json_logs: bool) -> list[Processor]:
    return [
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.dict_tracebacks if json_logs else structlog.processors.format_exc_info,
        redact_access_token,
    ]


def setup_logger(log_level: int | str, console_render: bool) -> None:
    """Route structlog and stdlib logging (urllib3, niquests) through one redacting chain."""
    if isinstance(log_level, str):
        log_level = getLevelNamesMapping().get(log_level.upper(), logging.INFO)

    shared_processors = build_processors(json_logs=not console_render)

    structlog.configure(
        processors=[*shared_processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    if console_render:
        renderer: Processor = structlog.dev.ConsoleRenderer(colors=True)
    else:
        renderer = structlog.processors.JSONRenderer(serializer=partial(ujson.dumps, ensure_ascii=False))

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        ),
    )
    root_logger = logging.getLogger()
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)


def setup_logger_from_settings(settings: PingenSettings) -> None:
    setup_logger(log_level=settings.log_level, console_render=settings.debug)
