# landing/api/routes/__init__.py
from landing.api.routes import waitlist

__all__ = ['waitlist']
