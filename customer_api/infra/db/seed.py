# customer_api/infra/db/seed.py
import logging

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from customer_api.infra.repositories.customer_repository import SqlCustomerRepository

logger = logging.getLogger(__name__)

SAMPLE_CUSTOMERS = [
    ("Alice", "Sample1"),
    ("Bob", "Sample2"),
]


async def seed_sample_customers(db: AsyncSession) -> int:
    """Carga los clientes de ejemplo si la tabla está vacía. Devuelve cuántos insertó."""
    total = (await db.execute(text("SELECT COUNT(*) FROM customer"))).scalar_one()
    if total:
        logger.info(f"Tabla customer con {total} filas; no se cargan datos de ejemplo")
        return 0

    repo = SqlCustomerRepository(db)
    for first_name, last_name in SAMPLE_CUSTOMERS:
        await repo.add(first_name, last_name)
        logger.info(f"Cargando cliente de ejemplo: {first_name} {last_name}")
    return len(SAMPLE_CUSTOMERS)
