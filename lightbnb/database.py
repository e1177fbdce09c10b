"""
Store client for the LightBnB relational database.
Wraps an async SQLAlchemy engine and session factory behind an explicitly
constructed object that data access functions receive as an argument.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy import text, Integer
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional
from lightbnb.config import Settings, get_settings
import logging

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all database models.
    Every LightBnB table is keyed by an autoincrement integer id.
    """

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    def __repr__(self) -> str:
        """String representation of the model."""
        return f"<{self.__class__.__name__}(id={self.id})>"


class Store:
    """
    Connection to the relational store.

    Owns one engine and one session factory. Construct it once at startup,
    pass it to every data access call, and close it on shutdown.
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        max_result_limit: int = 100,
        **engine_kwargs: Any
    ):
        self.database_url = database_url
        self.max_result_limit = max_result_limit
        self.engine: AsyncEngine = create_async_engine(database_url, echo=echo, **engine_kwargs)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    def __repr__(self) -> str:
        return f"<Store(url={self.engine.url.render_as_string(hide_password=True)})>"

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Open a session for a single operation.
        Rolls back if the operation raises and always closes the session.
        """
        async with self.session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def ping(self) -> bool:
        """
        Test store connectivity.
        Returns True if connection is successful, False otherwise.
        """
        try:
            async with self.session() as session:
                result = await session.execute(text("SELECT 1"))
                result.scalar()
                logger.info("Database connection successful")
                return True
        except Exception as e:
            logger.error(f"Database connection failed: {e}")
            return False

    async def create_tables(self) -> None:
        """Create every table registered on the declarative base."""
        # Importing the package registers the models on Base.metadata
        import lightbnb.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
            logger.info("Database tables created successfully")

    async def drop_tables(self) -> None:
        """Drop every table. Only meant for development and tests."""
        import lightbnb.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            logger.info("Database tables dropped successfully")

    async def close(self) -> None:
        """Dispose of the engine and its pooled connections."""
        await self.engine.dispose()
        logger.info("Database connections closed")

    async def get_database_info(self) -> Dict[str, Any]:
        """
        Get connection information for monitoring.
        Returns the server version and connection pool status.
        """
        try:
            async with self.session() as session:
                if self.engine.dialect.name == "sqlite":
                    version_result = await session.execute(text("SELECT sqlite_version()"))
                else:
                    version_result = await session.execute(text("SELECT version()"))
                version = version_result.scalar()

            return {
                "database_version": version,
                "pool_status": self.engine.pool.status(),
            }
        except Exception as e:
            logger.error(f"Failed to get database info: {e}")
            return {"error": str(e)}


def create_store(settings: Optional[Settings] = None) -> Store:
    """
    Build a store from settings.
    PostgreSQL URLs get the configured pool; SQLite URLs use the driver defaults.
    """
    settings = settings or get_settings()

    engine_kwargs: Dict[str, Any] = {}
    if not settings.uses_sqlite:
        engine_kwargs = {
            "pool_size": settings.pool_size,
            "max_overflow": settings.max_overflow,
            "pool_pre_ping": True,
            "pool_recycle": settings.pool_recycle,
            "pool_timeout": settings.pool_timeout,
            "connect_args": {
                "server_settings": {
                    "application_name": settings.app_name.lower(),
                }
            },
        }

    store = Store(
        settings.database_url,
        echo=settings.debug,
        max_result_limit=settings.max_result_limit,
        **engine_kwargs
    )
    logger.debug(f"Created store for environment {settings.environment}")
    return store
