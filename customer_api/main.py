# customer_api/main.py
import logging

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from customer_api.api.router import api_router
from customer_api.core.config import settings
from customer_api.core.logging import setup_logging
from customer_api.core.rate_limit import limiter, rate_limit_exceeded_handler
from customer_api.infra.db.seed import seed_sample_customers
from customer_api.infra.db.session import AsyncSessionLocal, engine, init_db

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    setup_logging()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.PROJECT_VERSION,
    )

    # Rate limiting
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # Routers
    app.include_router(api_router)

    @app.on_event("startup")
    async def on_startup() -> None:
        logger.info(f"🚀 {settings.PROJECT_NAME} {settings.PROJECT_VERSION} iniciada")
        if settings.CREATE_TABLES_ON_STARTUP:
            await init_db()
        if settings.SEED_SAMPLE_DATA:
            async with AsyncSessionLocal() as db:
                await seed_sample_customers(db)

    @app.on_event("shutdown")
    async def on_shutdown() -> None:
        await engine.dispose()
        logger.info(f"🛑 Cerrando {settings.PROJECT_NAME}")

    @app.get("/")
    async def root():
        return {
            "service": settings.PROJECT_NAME,
            "version": settings.PROJECT_VERSION,
            "status": "ok",
        }

    return app


app = create_app()
