"""Async engine and sessions for the comment store."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from agora.config import DatabaseSettings


def create_engine(database: DatabaseSettings, echo: bool = False) -> AsyncEngine:
    """Create the asyncpg-backed engine.

    Args:
        database: Connection URL and pool sizing
        echo: Log every SQL statement

    Returns:
        Async engine with a pre-pinged connection pool
    """
    return create_async_engine(
        database.url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Repositories flush explicitly; loaded rows stay usable after commit
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
