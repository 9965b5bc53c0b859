# customer_api/schemas/health_schemas.py
from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    database: str
    timestamp: str
    service: str
    version: str
