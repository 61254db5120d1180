"""Lógica de negocio de la lista de espera: validación, alta y conteo"""
import enum
import logging
from dataclasses import dataclass
from typing import Any, Optional

from pydantic import ValidationError

from landing.config import (
    DISPLAY_COUNT_OFFSET,
    WELCOME_MESSAGE,
    INVALID_EMAIL_MESSAGE,
    DUPLICATE_EMAIL_MESSAGE,
    INTERNAL_ERROR_MESSAGE
)
from landing.database.store import WaitlistStore
from landing.exceptions import DuplicateError, InvalidInputError, StorageError
from landing.schemas.registration import RegistrationResponse, WaitlistSubmission

logger = logging.getLogger(__name__)


class RegistrationStatus(str, enum.Enum):
    OK = "ok"
    INVALID = "invalid"
    DUPLICATE = "duplicate"
    INTERNAL_ERROR = "internal_error"


@dataclass
class RegistrationResult:
    status: RegistrationStatus
    message: str
    registration: Optional[RegistrationResponse] = None

    @property
    def ok(self) -> bool:
        return self.status is RegistrationStatus.OK


def validate_email(email: Any) -> str:
    """
    Valida el email recibido del cliente

    Args:
        email: valor tal cual llegó en el cuerpo de la petición

    Returns:
        El email sin modificar (se respetan mayúsculas y espacios)

    Raises:
        InvalidInputError: falta, no es texto, está vacío o no contiene '@'
    """
    try:
        return WaitlistSubmission(email=email).email
    except ValidationError as e:
        raise InvalidInputError(str(e)) from e


class RegistrationService:
    """
    Expone el WaitlistStore con validación de entrada.

    El store se inyecta: se abre una vez al arrancar y se comparte entre peticiones.
    El duplicado no es un error del servidor, el cliente puede seguir al checkout.
    """

    def __init__(self, store: WaitlistStore, display_offset: int = DISPLAY_COUNT_OFFSET):
        self.store = store
        self.display_offset = display_offset

    def register(self, email: Any) -> RegistrationResult:
        try:
            email = validate_email(email)
        except InvalidInputError:
            return RegistrationResult(RegistrationStatus.INVALID, INVALID_EMAIL_MESSAGE)

        try:
            registration = self.store.insert(email)
        except DuplicateError:
            logger.info("Waitlist re-submission rejected as duplicate")
            logger.debug("Duplicate email=%s", email)
            return RegistrationResult(RegistrationStatus.DUPLICATE, DUPLICATE_EMAIL_MESSAGE)
        except StorageError as e:
            logger.error("Failed to register signup: %s", e, exc_info=e)
            return RegistrationResult(RegistrationStatus.INTERNAL_ERROR, INTERNAL_ERROR_MESSAGE)

        logger.info("New waitlist signup: id=%s", registration.id)
        logger.debug("Signup id=%s email=%s", registration.id, email)
        return RegistrationResult(
            RegistrationStatus.OK,
            WELCOME_MESSAGE,
            RegistrationResponse.model_validate(registration)
        )

    def get_display_count(self) -> int:
        """Conteo real más el desplazamiento cosmético configurado"""
        return self.store.count() + self.display_offset
