"""
Persistencia de la lista de espera.

Tabla de solo inserción: no hay operaciones de actualización ni borrado.
La unicidad del email la impone la base de datos, no el servicio.
"""
import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from landing.database.session import Base, create_session_factory
from landing.exceptions import DuplicateError, StorageError
from landing.models.registration import Registration

logger = logging.getLogger(__name__)


class WaitlistStore:
    """Acceso a la tabla `waitlist` sobre un engine compartido por el proceso"""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.SessionLocal = create_session_factory(engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        db = self.SessionLocal()
        try:
            yield db
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def initialize(self):
        """Crea la tabla si no existe. Seguro de llamar en cada arranque."""
        try:
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as e:
            raise StorageError(f"Could not initialize waitlist table: {e}") from e

    def insert(self, email: str) -> Registration:
        """
        Inserta un nuevo registro con la fecha asignada por la base de datos

        Raises:
            DuplicateError: el email ya existe
            StorageError: cualquier otra falla de la base de datos
        """
        try:
            with self.session() as db:
                registration = Registration(email=email)
                db.add(registration)
                db.commit()
                db.refresh(registration)
        except IntegrityError as e:
            raise DuplicateError(email) from e
        except SQLAlchemyError as e:
            raise StorageError(f"Could not insert registration: {e}") from e

        logger.debug("Inserted registration id=%s", registration.id)
        return registration

    def count(self) -> int:
        """Total de registros persistidos"""
        try:
            with self.session() as db:
                return db.query(Registration).count()
        except SQLAlchemyError as e:
            raise StorageError(f"Could not count registrations: {e}") from e

    def close(self):
        """Libera el pool de conexiones al apagar el proceso"""
        self.engine.dispose()
