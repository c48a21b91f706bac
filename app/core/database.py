# app/core/database.py
from typing import AsyncIterator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from app.core.config import Settings


class Base(DeclarativeBase):
    pass


def build_engine(settings: Settings) -> AsyncEngine:
    """
    Crea el pool de conexiones. Lo crea y lo cierra el lifespan de la app,
    no hay engine global.
    """
    url = make_url(settings.DATABASE_URL)
    kwargs = {
        # pool_recycle: Cierra conexiones viejas para evitar que el servidor las corte de golpe.
        "pool_recycle": settings.DB_POOL_RECYCLE,
        # pool_pre_ping: Comprueba si la conexión está viva antes de cada consulta.
        "pool_pre_ping": True,
    }
    # SQLite en memoria usa un pool estático (una sola conexión), no admite tamaño
    if not (url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")):
        kwargs.update(
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=0,
            pool_timeout=settings.DB_POOL_TIMEOUT,
        )
    return create_async_engine(url, **kwargs)


def build_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, autoflush=False, expire_on_commit=False)


async def create_tables(engine: AsyncEngine, reset: bool = False) -> None:
    # Importamos los modelos para que queden registrados en Base.metadata
    from app.models import friend, game  # noqa: F401

    async with engine.begin() as conn:
        if reset:
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


async def ping(engine: AsyncEngine) -> None:
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    # Una sesión por petición: se toma del pool y se devuelve al terminar
    session_factory = request.app.state.sessionmaker
    async with session_factory() as db:
        yield db
