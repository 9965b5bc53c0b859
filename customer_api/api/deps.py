# customer_api/api/deps.py
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from customer_api.domain.services.customer_service import CustomerService
from customer_api.infra.db.session import get_db
from customer_api.infra.repositories.customer_repository import (
    CustomerRepository,
    SqlCustomerRepository,
)


def get_customer_repository(db: AsyncSession = Depends(get_db)) -> CustomerRepository:
    return SqlCustomerRepository(db)


def get_customer_service(
    repository: CustomerRepository = Depends(get_customer_repository),
) -> CustomerService:
    return CustomerService(repository)
