"""Alembic runner shared by deploy scripts and tests."""

from pathlib import Path

from alembic.config import Config

from alembic import command
from src.hrdesk.core.logging import get_logger

logger = get_logger(__name__)

# alembic.ini sits at the repository root, next to src/.
DEFAULT_ALEMBIC_INI = Path(__file__).resolve().parents[4] / "alembic.ini"


def run_migrations_sync(revision: str = "head", config_path: str | Path | None = None) -> None:
    """Upgrade the database to `revision`.

    The database URL is read from settings by src/alembic/env.py, never
    from the ini file.
    """
    alembic_cfg = Config(str(config_path or DEFAULT_ALEMBIC_INI))
    logger.info("Running migrations", revision=revision)
    command.upgrade(alembic_cfg, revision)
