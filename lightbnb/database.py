"""
Database engine management for PostgreSQL.
Creates the shared async SQLAlchemy engine (asyncpg driver) and bootstraps the schema.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy import text
from lightbnb.config import Settings, get_settings
from pathlib import Path
from typing import Optional
import logging

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).parent / "sql" / "schema.sql"

DROP_STATEMENTS = [
    "DROP TABLE IF EXISTS property_reviews CASCADE",
    "DROP TABLE IF EXISTS reservations CASCADE",
    "DROP TABLE IF EXISTS properties CASCADE",
    "DROP TABLE IF EXISTS users CASCADE",
]


def create_engine(settings: Optional[Settings] = None) -> AsyncEngine:
    """
    Create the async engine backing every repository.

    Args:
        settings: Settings to read connection and pool parameters from;
                  defaults to the cached application settings

    Returns:
        AsyncEngine with its own connection pool
    """
    settings = settings or get_settings()
    engine = create_async_engine(
        settings.database_url,
        echo=settings.echo_sql,
        pool_size=settings.pool_size,
        max_overflow=settings.max_overflow,
        pool_pre_ping=True,
        pool_recycle=settings.pool_recycle,
        pool_timeout=settings.pool_timeout,
        connect_args={
            "server_settings": {
                "application_name": "lightbnb",
            }
        }
    )
    logger.info(f"Created database engine for {engine.url.host}/{engine.url.database}")
    return engine


def load_schema_statements(path: Path = SCHEMA_PATH) -> list:
    """Split the schema file into individual statements (asyncpg runs one per call)."""
    lines = [
        line for line in path.read_text(encoding="utf-8").splitlines()
        if not line.strip().startswith("--")
    ]
    return [stmt.strip() for stmt in "\n".join(lines).split(";") if stmt.strip()]


async def check_database_connection(engine: AsyncEngine) -> bool:
    """
    Test database connectivity.
    Returns True if connection is successful, False otherwise.
    """
    try:
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
            result.scalar()
            logger.info("Database connection successful")
            return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False


async def create_schema(engine: AsyncEngine) -> None:
    """Create the users, properties, reservations and property_reviews tables."""
    async with engine.begin() as conn:
        for statement in load_schema_statements():
            await conn.execute(text(statement))
    logger.info("Database schema created successfully")


async def drop_schema(engine: AsyncEngine, settings: Optional[Settings] = None) -> None:
    """
    Drop all tables.
    Refused in production.
    """
    settings = settings or get_settings()
    if settings.is_production:
        raise RuntimeError("Cannot drop tables in production environment")

    async with engine.begin() as conn:
        for statement in DROP_STATEMENTS:
            await conn.execute(text(statement))
    logger.info("Database schema dropped successfully")


async def close_engine(engine: AsyncEngine) -> None:
    """Dispose the engine's pool."""
    await engine.dispose()
    logger.info("Database connections closed")
