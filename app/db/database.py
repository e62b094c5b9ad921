from typing import Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import declarative_base
from ..core.config import settings

# Base for all models
Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE CASCADE unless the pragma is set per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine(database_url: str, **kwargs) -> AsyncEngine:
    """Create an async engine for the given URL"""
    if database_url.startswith("sqlite"):
        engine = create_async_engine(database_url, echo=settings.DEBUG, **kwargs)
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    return create_async_engine(
        database_url,
        echo=settings.DEBUG,
        pool_pre_ping=True,
        pool_size=20,
        max_overflow=30,
        **kwargs,
    )


# Async engine for database operations
engine = create_engine(settings.DATABASE_URL)

# Async session maker
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False
)


async def get_db() -> AsyncSession:
    """Dependency to get database session"""
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_db(bind: Optional[AsyncEngine] = None):
    """Initialize database tables"""
    async with (bind or engine).begin() as conn:
        # Import all models here to ensure they are registered with Base
        from ..models import customer, customer_attachment  # noqa: F401
        await conn.run_sync(Base.metadata.create_all)
