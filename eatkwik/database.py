"""
Database connection and session management.

Every entity is stored as one row per record; nested parts (order lines,
ingredients, feedbacks, managed categories) live in JSON columns.
"""

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from eatkwik.config import settings


engine = create_async_engine(
    settings.database_url,
    echo=settings.database_echo,
    pool_pre_ping=True,
)

SessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    pass


async def get_db():
    """
    Dependency injection for FastAPI routes.
    Yields a database session per request and ensures cleanup.
    """
    async with SessionLocal() as session:
        yield session


async def init_db(bind=None):
    """Create all tables. Called at startup when auto_create_tables is on."""
    # Register models on the metadata
    import eatkwik.models  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
