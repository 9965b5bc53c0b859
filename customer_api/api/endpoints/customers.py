# customer_api/api/endpoints/customers.py
import logging

from fastapi import APIRouter, Depends, HTTPException, Path, Request

from customer_api.api.deps import get_customer_service
from customer_api.core.rate_limit import current_rate_limit, limiter
from customer_api.domain.services.customer_service import CustomerService
from customer_api.schemas.customer_schemas import (
    CustomerListResponse,
    CustomerOut,
    CustomerRequest,
    MessageResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/customers", tags=["customers"])

# Rango de la columna Integer (32 bits en Postgres); fuera de rango es 422
ID_MIN = -(2**31)
ID_MAX = 2**31 - 1


@router.post("", response_model=MessageResponse)
@limiter.limit(current_rate_limit)
async def crear_customer(
    request: Request,
    data: CustomerRequest,
    service: CustomerService = Depends(get_customer_service),
):
    try:
        await service.create(data.first_name, data.last_name)
    except Exception as e:
        logger.error(f"❌ Error creando customer: {e}")
        raise HTTPException(status_code=500, detail=f"Error creating customer: {e}")

    logger.info(f"Customer creado: {data.first_name} {data.last_name}")
    return MessageResponse()


@router.get("", response_model=CustomerListResponse)
@limiter.limit(current_rate_limit)
async def listar_customers(
    request: Request,
    service: CustomerService = Depends(get_customer_service),
):
    try:
        customers = await service.list()
    except Exception as e:
        logger.error(f"❌ Error listando customers: {e}")
        raise HTTPException(status_code=500, detail=f"Error listing customers: {e}")

    return CustomerListResponse(customers=[CustomerOut.from_entity(c) for c in customers])


@router.put("/{id}", response_model=MessageResponse)
@limiter.limit(current_rate_limit)
async def actualizar_customer(
    request: Request,
    data: CustomerRequest,
    id: int = Path(..., ge=ID_MIN, le=ID_MAX),
    service: CustomerService = Depends(get_customer_service),
):
    # Si el id no existe es un no-op y también responde "success"
    try:
        await service.update(id, data.first_name, data.last_name)
    except Exception as e:
        logger.error(f"❌ Error actualizando customer {id}: {e}")
        raise HTTPException(status_code=500, detail=f"Error updating customer: {e}")

    logger.info(f"Customer actualizado: id={id}")
    return MessageResponse()


@router.delete("/{id}", response_model=MessageResponse)
@limiter.limit(current_rate_limit)
async def eliminar_customer(
    request: Request,
    id: int = Path(..., ge=ID_MIN, le=ID_MAX),
    service: CustomerService = Depends(get_customer_service),
):
    try:
        await service.delete(id)
    except Exception as e:
        logger.error(f"❌ Error eliminando customer {id}: {e}")
        raise HTTPException(status_code=500, detail=f"Error deleting customer: {e}")

    logger.info(f"Customer eliminado: id={id}")
    return MessageResponse()
