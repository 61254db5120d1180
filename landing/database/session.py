"""Motor de base de datos y fábrica de sesiones."""
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from landing.config import DATABASE_URL, SQLITE_BUSY_TIMEOUT

Base = declarative_base()


def create_db_engine(database_url: str = DATABASE_URL) -> Engine:
    """Crea el engine; para SQLite permite compartir el archivo entre hilos."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args = {
            "check_same_thread": False,
            "timeout": SQLITE_BUSY_TIMEOUT,
        }
    # hide_parameters: los emails no aparecen en los mensajes de error
    return create_engine(
        database_url,
        connect_args=connect_args,
        pool_pre_ping=True,
        hide_parameters=True
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
