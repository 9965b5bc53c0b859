# customer_api/infra/repositories/customer_repository.py
import logging
from abc import ABC, abstractmethod
from typing import List

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from customer_api.domain.entities.customer import Customer

logger = logging.getLogger(__name__)


class CustomerRepository(ABC):
    """Operaciones sobre la tabla `customer`."""

    @abstractmethod
    async def add(self, first_name: str, last_name: str) -> None:
        ...

    @abstractmethod
    async def find(self) -> List[Customer]:
        ...

    @abstractmethod
    async def update(self, id: int, first_name: str, last_name: str) -> None:
        ...

    @abstractmethod
    async def delete(self, id: int) -> None:
        ...


class SqlCustomerRepository(CustomerRepository):
    """
    Implementación con SQL parametrizado sobre una AsyncSession.
    Cada llamada es una sola sentencia; las escrituras se confirman al momento.
    Los errores del driver se propagan sin capturar.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def add(self, first_name: str, last_name: str) -> None:
        await self.db.execute(
            text(
                """
                INSERT INTO customer
                    (first_name, last_name)
                VALUES
                    (:first_name, :last_name)
                """
            ),
            {"first_name": first_name, "last_name": last_name},
        )
        await self.db.commit()

    async def find(self) -> List[Customer]:
        res = await self.db.execute(
            text(
                """
                SELECT id, first_name, last_name
                FROM customer
                ORDER BY id
                """
            )
        )
        return [
            Customer(id=int(row.id), first_name=row.first_name, last_name=row.last_name)
            for row in res.fetchall()
        ]

    async def update(self, id: int, first_name: str, last_name: str) -> None:
        res = await self.db.execute(
            text(
                """
                UPDATE customer
                SET first_name = :first_name,
                    last_name = :last_name
                WHERE id = :id
                """
            ),
            {"id": id, "first_name": first_name, "last_name": last_name},
        )
        await self.db.commit()
        # 0 filas no es error
        if res.rowcount == 0:
            logger.debug(f"UPDATE customer id={id}: sin filas afectadas")

    async def delete(self, id: int) -> None:
        res = await self.db.execute(
            text("DELETE FROM customer WHERE id = :id"),
            {"id": id},
        )
        await self.db.commit()
        if res.rowcount == 0:
            logger.debug(f"DELETE customer id={id}: sin filas afectadas")
