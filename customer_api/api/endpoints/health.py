# customer_api/api/endpoints/health.py
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from customer_api.core.config import settings
from customer_api.infra.db.session import get_db
from customer_api.schemas.health_schemas import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(db: AsyncSession = Depends(get_db)):
    t = datetime.now(timezone.utc).isoformat()

    try:
        await db.execute(text("SELECT 1"))
        db_status = "operational"
    except Exception as e:
        logger.error(f"❌ Health check DB fallido: {e}")
        db_status = "major_outage"

    return HealthResponse(
        status="ok" if db_status == "operational" else "degraded",
        database=db_status,
        timestamp=t,
        service=settings.PROJECT_NAME,
        version=settings.PROJECT_VERSION,
    )
