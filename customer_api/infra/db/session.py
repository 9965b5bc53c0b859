# customer_api/infra/db/session.py
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from customer_api.core.config import settings
from customer_api.infra.db.base import Base
from customer_api.infra.db.models.customer import CustomerModel  # noqa: F401 (registra la tabla customer)


def build_engine(database_url: str, **kwargs) -> AsyncEngine:
    """Engine async para la URL dada; kwargs extra van a create_async_engine (p.ej. poolclass)."""
    return create_async_engine(
        database_url,
        echo=settings.ENVIRONMENT == "development",
        future=True,
        **kwargs,
    )


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=bind, expire_on_commit=False, class_=AsyncSession)


engine = build_engine(settings.DATABASE_URL)
AsyncSessionLocal = build_session_factory(engine)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependencia FastAPI: una sesión por request."""
    async with AsyncSessionLocal() as session:
        yield session


async def init_db(bind: AsyncEngine | None = None) -> None:
    """Crea la tabla customer si no existe. Sin bind usa el engine de la app."""
    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
