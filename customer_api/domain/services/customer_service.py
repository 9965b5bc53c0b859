# customer_api/domain/services/customer_service.py
from typing import List

from customer_api.domain.entities.customer import Customer
from customer_api.infra.repositories.customer_repository import CustomerRepository


class CustomerService:
    """
    Operaciones de cliente expuestas a la capa HTTP.
    Hoy delega 1:1 en el repositorio; aquí va la lógica de negocio futura.
    """

    def __init__(self, repository: CustomerRepository):
        self.repository = repository

    async def create(self, first_name: str, last_name: str) -> None:
        await self.repository.add(first_name, last_name)

    async def list(self) -> List[Customer]:
        return await self.repository.find()

    async def update(self, id: int, first_name: str, last_name: str) -> None:
        await self.repository.update(id, first_name, last_name)

    async def delete(self, id: int) -> None:
        await self.repository.delete(id)
