from fastapi import Request

from landing.services.registration import RegistrationService


def get_registration_service(request: Request) -> RegistrationService:
    """Dependencia de FastAPI: el servicio creado al construir la app"""
    return request.app.state.registration_service
