"""Structured logging for the service, managers and migrations.

Everything goes through structlog on top of the stdlib root logger, so
SQLAlchemy and Alembic records end up in the same stream. Request-scoped
fields (request_id, tenant_id, user_id) live in contextvars and are merged
into every event emitted while the request is being served.
"""

import logging
import sys
from uuid import UUID

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars
from structlog.typing import EventDict, Processor, WrappedLogger

# Library loggers and the level they are pinned to outside of debug mode.
QUIET_LOGGERS: dict[str, int] = {
    "sqlalchemy.engine": logging.WARNING,
    "aiosqlite": logging.WARNING,
    "asyncio": logging.WARNING,
    "alembic": logging.INFO,
}


def _service_adder(service: str, env: str) -> Processor:
    def add_service(_logger: WrappedLogger, _method: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service", service)
        event_dict.setdefault("env", env)
        return event_dict

    return add_service


def setup_logging(
    debug: bool = False,
    service: str = "hrdesk",
    env: str = "development",
    sql_echo: bool = False,
) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        debug: Colored console output and DEBUG level. Otherwise JSON at INFO.
        service: Value of the `service` field on every event.
        env: Value of the `env` field on every event.
        sql_echo: Log every SQL statement through `sqlalchemy.engine`.
    """
    log_level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level, force=True)

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        _service_adder(service, env),
        structlog.processors.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if debug:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    for name, level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(level)
    if sql_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def bind_request_context(request_id: str | None) -> None:
    """Bind the correlation ID of the current request, when there is one."""
    if request_id:
        bind_contextvars(request_id=request_id)


def bind_caller_context(tenant_id: UUID, user_id: UUID | None = None) -> None:
    """Bind the acting tenant (and user, when known) to all subsequent log calls."""
    bind_contextvars(tenant_id=str(tenant_id))
    if user_id is not None:
        bind_contextvars(user_id=str(user_id))


def clear_request_context() -> None:
    clear_contextvars()
