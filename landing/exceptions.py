"""
Errores del dominio de la lista de espera.

Ninguno es fatal para el proceso: la capa de servicio los traduce
a una respuesta para el cliente.
"""


class WaitlistError(Exception):
    """Clase base para errores de la lista de espera."""

    pass


class InvalidInputError(WaitlistError):
    """El email falta, no es texto o no contiene '@'."""

    pass


class DuplicateError(WaitlistError):
    """El email ya está registrado (violación de unicidad)."""

    def __init__(self, email: str):
        super().__init__(f"Email already registered: {email}")
        self.email = email


class StorageError(WaitlistError):
    """Cualquier otra falla de la base de datos (I/O, corrupción, bloqueo)."""

    pass
