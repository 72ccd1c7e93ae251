from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from sqlalchemy import text

from src.hrdesk.api.middlewares import setup_middlewares
from src.hrdesk.api.v1.router import api_router
from src.hrdesk.core.config import get_settings
from src.hrdesk.core.db import dispose_engine, unit_of_work
from src.hrdesk.core.exceptions import setup_exception_handlers
from src.hrdesk.core.logging import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan - startup and shutdown."""
    settings = get_settings()
    setup_logging(
        settings.debug,
        service=settings.app_name,
        env=settings.app_env,
        sql_echo=settings.database_echo,
    )
    logger.info("Application starting")

    yield

    logger.info("Closing connections...")
    await dispose_engine()
    logger.info("Shutdown complete")


OPENAPI_TAGS = [
    {"name": "companies", "description": "Companies, their bases and employees"},
    {"name": "persons", "description": "Person (employee) records"},
    {"name": "ccnl", "description": "Collective labour agreements and salary tables"},
    {"name": "users", "description": "Users of the calling tenant"},
]


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Multi-tenant HR records API",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        openapi_url="/openapi.json" if settings.enable_openapi else None,
        lifespan=lifespan,
    )

    setup_exception_handlers(app)
    setup_middlewares(app, settings)
    app.include_router(api_router)

    @app.get("/health")
    async def health() -> JSONResponse:
        """Health check with database validation."""
        try:
            async with unit_of_work() as session:
                await session.execute(text("SELECT 1"))
        except Exception as e:
            logger.warning("Health check failed", error=str(e))
            return JSONResponse(
                content={"status": "unhealthy", "database": f"unhealthy: {e}"},
                status_code=503,
            )
        return JSONResponse(content={"status": "healthy", "database": "healthy"})

    return app


app = create_app()
