"""structlog setup for Athena services.

Every line is stamped with the service name and the running app version, so
logs from the desktop build and the hosted build can be told apart.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

# httpx logs every outbound request at INFO; a health sweep would flood the log.
NOISY_LOGGERS = ("uvicorn.access", "httpx", "httpcore")


def setup_logging(
    *,
    log_level: str = "INFO",
    json_logs: bool = False,
    service_name: str = "athena",
    app_version: str | None = None,
) -> None:
    """Route structlog and stdlib records through one stdout handler.

    Args:
        log_level: Root log level name.
        json_logs: Emit JSON lines instead of coloured console output.
        service_name: Value of the ``service`` key on every line.
        app_version: Value of the ``version`` key, omitted when None.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        stamp_service(service_name, app_version),
    ]

    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer(colors=True)
    )

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
            foreign_pre_chain=pre_chain,
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(log_level.upper())

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def stamp_service(
    service_name: str, app_version: str | None = None
) -> structlog.types.Processor:
    """Processor adding ``service`` (and ``version`` when known) to each event."""

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict.setdefault("service", service_name)
        if app_version:
            event_dict.setdefault("version", app_version)
        return event_dict

    return processor
