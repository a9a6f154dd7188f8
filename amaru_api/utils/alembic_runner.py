import logging
from pathlib import Path
from typing import Optional

from alembic import command
from alembic.config import Config

logger = logging.getLogger("alembic_runner")

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def run_migrations_if_needed(alembic_ini_path: Optional[str] = None) -> bool:
    """Run `alembic upgrade head` using the given alembic.ini or the project one.

    Called on startup when RUN_MIGRATIONS is set. Errors are logged and do not
    abort startup; returns True when the upgrade ran.
    """
    ini_path = Path(alembic_ini_path) if alembic_ini_path else PROJECT_ROOT / "alembic.ini"
    if not ini_path.exists():
        logger.info("alembic.ini not found at %s; skipping automatic migrations", ini_path)
        return False

    try:
        cfg = Config(str(ini_path))
        cfg.set_main_option("script_location", str(ini_path.parent / "alembic"))
        # sqlalchemy.url is resolved from settings inside alembic/env.py
        logger.info("Running alembic upgrade head...")
        command.upgrade(cfg, "head")
        logger.info("Alembic upgrade head finished")
        return True
    except Exception as e:
        logger.exception("Failed to run alembic migrations automatically: %s", e)
        return False
