# landing/schemas/__init__.py
from landing.schemas.registration import (
    WaitlistSubmission,
    RegistrationResponse,
    WaitlistResponse,
    CountResponse,
    ErrorResponse
)

__all__ = [
    'WaitlistSubmission',
    'RegistrationResponse',
    'WaitlistResponse',
    'CountResponse',
    'ErrorResponse'
]
