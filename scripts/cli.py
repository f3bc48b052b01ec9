import asyncio
import logging
import sys

import alembic.config
import uvicorn

from bingo.core.config import settings
from bingo.core.logging_config import configure_logging
from bingo.db.session import init_db

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


def start_dev_server() -> None:
    logger.info("Starting development server with reload")
    uvicorn.run(
        "bingo.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level=settings.LOG_LEVEL.lower(),
    )


def start_prod_server() -> None:
    """Start the server without auto-reload."""
    logger.info("Starting production server")
    uvicorn.run(
        "bingo.main:app",
        host="0.0.0.0",
        port=8000,
        log_level=settings.LOG_LEVEL.lower(),
    )


def run_migrations() -> None:
    logger.info("Running migrations: upgrade head")
    alembic_args = ["upgrade", "head"]
    alembic.config.main(argv=alembic_args)
    logger.info("Migrations completed")


def rollback_migration() -> None:
    logger.info("Rolling back migration: downgrade -1")
    alembic_args = ["downgrade", "-1"]
    alembic.config.main(argv=alembic_args)
    logger.info("Migration rollback completed")


def create_migration() -> None:
    if len(sys.argv) < 2:
        logger.error("Migration message is required")
        print("Error: Migration message is required")
        print('Usage: migrate-create "your migration message"')
        sys.exit(1)

    message = sys.argv[1]
    logger.info("Creating migration with message: %s", message)
    alembic_args = ["revision", "--autogenerate", "-m", message]
    alembic.config.main(argv=alembic_args)
    logger.info("Migration created")


def initialize_db() -> None:
    logger.info("Creating room, player and card tables")
    asyncio.run(init_db())
    logger.info("Database initialization completed")

