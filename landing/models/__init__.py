# landing/models/__init__.py
from landing.models.registration import Registration

__all__ = ['Registration']
