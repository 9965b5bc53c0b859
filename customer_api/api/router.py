# customer_api/api/router.py
from fastapi import APIRouter

from customer_api.api.endpoints.customers import router as customers_router
from customer_api.api.endpoints.health import router as health_router


api_router = APIRouter()

api_router.include_router(health_router)
api_router.include_router(customers_router)
