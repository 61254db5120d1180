# landing/services/__init__.py
from landing.services.registration import (
    RegistrationService,
    RegistrationStatus,
    RegistrationResult,
    validate_email
)

__all__ = ['RegistrationService', 'RegistrationStatus', 'RegistrationResult', 'validate_email']
