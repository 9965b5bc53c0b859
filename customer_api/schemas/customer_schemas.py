# customer_api/schemas/customer_schemas.py
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from customer_api.domain.entities.customer import Customer


class CustomerRequest(BaseModel):
    """Body de POST /customers y PUT /customers/{id}."""

    first_name: str = Field(..., examples=["Alice"])
    last_name: str = Field(..., examples=["Sample1"])


class CustomerOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")

    @classmethod
    def from_entity(cls, customer: Customer) -> "CustomerOut":
        return cls(id=customer.id, first_name=customer.first_name, last_name=customer.last_name)


class CustomerListResponse(BaseModel):
    customers: List[CustomerOut]


class MessageResponse(BaseModel):
    message: str = "success"
