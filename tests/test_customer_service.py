import asyncio

import pytest

from customer_api.domain.entities.customer import Customer
from customer_api.domain.services.customer_service import CustomerService
from customer_api.infra.repositories.customer_repository import CustomerRepository


class RecordingRepository(CustomerRepository):
    def __init__(self):
        self.calls = []

    async def add(self, first_name, last_name):
        self.calls.append(("add", first_name, last_name))

    async def find(self):
        self.calls.append(("find",))
        return [Customer(id=7, first_name="Alice", last_name="Sample1")]

    async def update(self, id, first_name, last_name):
        self.calls.append(("update", id, first_name, last_name))

    async def delete(self, id):
        self.calls.append(("delete", id))


def test_service_delegates_to_repository():
    repo = RecordingRepository()
    service = CustomerService(repo)

    async def run():
        await service.create("Alice", "Sample1")
        customers = await service.list()
        await service.update(7, "Alicia", "Changed")
        await service.delete(7)
        return customers

    customers = asyncio.run(run())

    assert customers == [Customer(id=7, first_name="Alice", last_name="Sample1")]
    assert repo.calls == [
        ("add", "Alice", "Sample1"),
        ("find",),
        ("update", 7, "Alicia", "Changed"),
        ("delete", 7),
    ]


def test_service_passes_values_unchanged():
    repo = RecordingRepository()
    service = CustomerService(repo)

    asyncio.run(service.create("  spaced  ", ""))

    assert repo.calls == [("add", "  spaced  ", "")]


def test_service_propagates_store_errors():
    class FailingRepository(RecordingRepository):
        async def find(self):
            raise ConnectionError("no db")

    service = CustomerService(FailingRepository())

    with pytest.raises(ConnectionError, match="no db"):
        asyncio.run(service.list())
