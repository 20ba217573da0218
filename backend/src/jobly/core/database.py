"""
Async Database Configuration
SQLAlchemy 2.0 async engine (asyncpg driver) exposed as a storage client
"""
from typing import Any, Dict, List, Sequence

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool

from jobly.application.repositories.interfaces import IStorageClient
from .config import Settings


# Base class for ORM models
Base = declarative_base()


class Database(IStorageClient):
    """
    Storage client backed by an async SQLAlchemy engine.

    Query text and positional parameters are handed to the driver untouched,
    so statements use asyncpg's native $1, $2, ... placeholders.

    Usage:
        db = Database.from_settings(settings)
        rows = await db.query("SELECT title FROM jobs WHERE title = $1", ["Chef"])
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    @classmethod
    def from_url(cls, url: str, **engine_args: Any) -> "Database":
        return cls(create_async_engine(url, **engine_args))

    @classmethod
    def from_settings(cls, config: Settings) -> "Database":
        """Build engine with pool settings derived from configuration"""
        engine_args: Dict[str, Any] = {
            "echo": config.DEBUG,
            "pool_pre_ping": True,
        }

        if config.DEBUG:
            engine_args["poolclass"] = NullPool
        else:
            engine_args.update({
                "pool_size": config.DB_POOL_SIZE,
                "max_overflow": config.DB_MAX_OVERFLOW,
                "pool_timeout": config.DB_POOL_TIMEOUT,
                "pool_recycle": config.DB_POOL_RECYCLE,
            })

        return cls.from_url(config.DATABASE_URL, **engine_args)

    async def query(self, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        """Execute one statement in its own transaction and return rows as dicts"""
        async with self.engine.begin() as conn:
            result = await conn.exec_driver_sql(sql, tuple(params))
            if not result.returns_rows:
                return []
            return [dict(row) for row in result.mappings().all()]

    async def init_db(self) -> None:
        """Initialize database (create tables)"""
        # Register table definitions on Base.metadata
        from jobly.infrastructure.persistence import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info(f"Tables ensured: {', '.join(sorted(Base.metadata.tables))}")

    async def close(self) -> None:
        """Close database connections"""
        await self.engine.dispose()

    async def health_check(self) -> bool:
        """Database health check"""
        try:
            await self.query("SELECT 1")
            return True
        except (SQLAlchemyError, OSError) as e:
            logger.warning(f"Database health check failed: {str(e)}")
            return False
