"""Database connection utilities."""

import asyncio
import logging
import sys
from pathlib import Path
from typing import AsyncGenerator, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

from study_tracker.config import get_settings

logger = logging.getLogger(__name__)

# Base class for models
Base = declarative_base()


def get_db_url() -> str:
    """Build database URL from settings.

    DATABASE_URL wins when set; otherwise the asyncpg URL is composed
    from the individual DB_* settings.
    """
    settings = get_settings()
    if settings.DATABASE_URL:
        return settings.DATABASE_URL
    return (
        f"postgresql+asyncpg://{settings.DB_USER}:{settings.DB_PASSWORD}"
        f"@{settings.DB_HOST}:{settings.DB_PORT}/{settings.DB_NAME}"
    )


class DatabaseManager:
    """Owns the async engine and session factory for the process."""

    def __init__(self) -> None:
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def engine(self) -> AsyncEngine:
        """Get or create database engine."""
        if self._engine is None:
            self._engine = create_async_engine(
                get_db_url(),
                echo=get_settings().DEBUG,
                pool_pre_ping=True,  # Verify connections before using
            )
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        """Get or create session factory bound to the engine."""
        if self._session_factory is None:
            self._session_factory = async_sessionmaker(
                self.engine, class_=AsyncSession, expire_on_commit=False
            )
        return self._session_factory

    async def verify_connection(self) -> bool:
        """Run a trivial query. Raises if the database is unreachable."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True

    async def close(self) -> None:
        """Dispose the engine and forget the session factory."""
        if self._engine is not None:
            await self._engine.dispose()
        self._engine = None
        self._session_factory = None


db_manager = DatabaseManager()


async def verify_db_connection() -> None:
    """Verify database connection. Raises exception if connection fails."""
    await db_manager.verify_connection()


async def run_migrations() -> None:
    """Run database migrations using Alembic."""
    from alembic import command
    from alembic.config import Config

    # alembic.ini lives in the project root
    project_root = Path(__file__).resolve().parents[2]
    alembic_ini_path = project_root / "alembic.ini"

    if not alembic_ini_path.exists():
        raise FileNotFoundError(
            f"Alembic configuration file not found at {alembic_ini_path}"
        )

    alembic_cfg = Config(str(alembic_ini_path))
    # ConfigParser treats % as interpolation
    alembic_cfg.set_main_option("sqlalchemy.url", get_db_url().replace("%", "%%"))
    alembic_cfg.attributes["configure_logger"] = False

    # env.py drives its own event loop, so keep it off ours
    await asyncio.to_thread(command.upgrade, alembic_cfg, "head")


async def init_db() -> None:
    """Initialize database connection and run migrations.

    Exits the application if the database cannot be reached.
    """
    try:
        if get_settings().RUN_MIGRATIONS:
            await run_migrations()
        await verify_db_connection()
        logger.info("Database initialized")
    except Exception as e:
        logger.critical(f"Failed to initialize database: {e}", exc_info=True)
        sys.exit(1)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield a database session for one request."""
    async with db_manager.session_factory() as session:
        yield session


async def close_db() -> None:
    """Close database connections."""
    await db_manager.close()
