"""Application middlewares."""

from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.hrdesk.core.config import Settings

from .logging_context import logging_context_middleware

__all__ = [
    "setup_middlewares",
    "logging_context_middleware",
]


def setup_middlewares(app: FastAPI, settings: Settings) -> None:
    """Configure all application middlewares.

    Starlette wraps each new middleware around the previous ones, so the
    last one added is the outermost and runs first.
    """

    # Innermost: sees the request id set by CorrelationIdMiddleware
    @app.middleware("http")
    async def _logging_context(request, call_next):  # type: ignore[no-untyped-def]
        return await logging_context_middleware(request, call_next)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
        allow_headers=["Content-Type", "X-Tenant-ID", "X-User-ID", "X-Request-ID"],
        expose_headers=["X-Request-ID"],
    )

    # Outermost: accepts or generates X-Request-ID and echoes it back
    app.add_middleware(CorrelationIdMiddleware)
