import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from landing.api.deps import get_registration_service
from landing.config import INTERNAL_ERROR_MESSAGE
from landing.exceptions import StorageError
from landing.schemas.registration import CountResponse, ErrorResponse, WaitlistResponse
from landing.services.registration import RegistrationService, RegistrationStatus

logger = logging.getLogger(__name__)

router = APIRouter()

# El duplicado es un error del cliente, no del servidor
STATUS_CODES = {
    RegistrationStatus.INVALID: 400,
    RegistrationStatus.DUPLICATE: 400,
    RegistrationStatus.INTERNAL_ERROR: 500,
}

@router.post(
    "/waitlist",
    response_model=WaitlistResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
)
def join_waitlist(
    payload: Any = Body(default=None),
    service: RegistrationService = Depends(get_registration_service)
):
    """Agregar un email a la lista de espera"""
    email = payload.get("email") if isinstance(payload, dict) else None

    result = service.register(email)

    if not result.ok:
        raise HTTPException(status_code=STATUS_CODES[result.status], detail=result.message)

    return {
        "success": True,
        "message": result.message
    }

@router.get(
    "/count",
    response_model=CountResponse,
    responses={500: {"model": ErrorResponse}}
)
def get_count(service: RegistrationService = Depends(get_registration_service)):
    """Cantidad de inscritos para mostrar en la página"""
    try:
        count = service.get_display_count()
    except StorageError as e:
        logger.error("Failed to count waitlist: %s", e, exc_info=e)
        raise HTTPException(status_code=500, detail=INTERNAL_ERROR_MESSAGE)

    return {"count": count}
