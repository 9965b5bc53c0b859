# customer_api/infra/db/models/customer.py
from sqlalchemy import Column, Integer, String

from customer_api.infra.db.base import Base


class CustomerModel(Base):
    """Tabla `customer`. Solo se usa para crear el esquema; el repositorio usa SQL."""

    __tablename__ = "customer"
    # ids nunca se reutilizan, tampoco en SQLite
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
