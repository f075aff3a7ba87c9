from typing import AsyncGenerator
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from .config import get_settings

_settings = get_settings()
_engine: AsyncEngine | None = None
_sessionmaker: async_sessionmaker[AsyncSession] | None = None


class Base(DeclarativeBase):
    """Base declarativa compartida por todos los modelos ORM."""


def get_engine() -> AsyncEngine:
    global _engine, _sessionmaker
    if _engine is None:
        _engine = create_async_engine(_settings.database_url, echo=False, pool_pre_ping=True)
        _sessionmaker = async_sessionmaker(bind=_engine, class_=AsyncSession, expire_on_commit=False)
    return _engine


async def init_db(engine: AsyncEngine | None = None) -> None:
    """Crea las tablas que falten. Sin migraciones: el esquema es una sola tabla."""
    # registra los modelos en Base.metadata
    from .models import animal  # noqa: F401

    engine = engine or get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    get_engine()
    async with _sessionmaker() as session:
        yield session
