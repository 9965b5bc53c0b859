# customer_api/domain/entities/customer.py
from dataclasses import dataclass


@dataclass(frozen=True)
class Customer:
    id: int
    first_name: str
    last_name: str
