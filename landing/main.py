import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from landing.api.routes import waitlist
from landing.config import (
    ALLOWED_ORIGINS,
    API_VERSION,
    DATABASE_URL,
    DISPLAY_COUNT_OFFSET,
    DUPLICATE_EMAIL_MESSAGE,
    HOST,
    INVALID_EMAIL_MESSAGE,
    PORT
)
from landing.database.session import create_db_engine
from landing.database.store import WaitlistStore
from landing.logger import configure_logging
from landing.services.registration import RegistrationService

logger = logging.getLogger(__name__)

WAITLIST_PATH = "/api/waitlist"


def create_app(database_url: Optional[str] = None, display_offset: Optional[int] = None) -> FastAPI:
    """
    Construye la aplicación con su propio store y servicio

    Args:
        database_url: URL de SQLAlchemy (por defecto DATABASE_URL)
        display_offset: desplazamiento del conteo mostrado (por defecto DISPLAY_COUNT_OFFSET)
    """
    store = WaitlistStore(create_db_engine(database_url or DATABASE_URL))
    service = RegistrationService(
        store,
        DISPLAY_COUNT_OFFSET if display_offset is None else display_offset
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Crear tablas
        store.initialize()
        logger.info("Waitlist store ready at %s", store.engine.url)
        yield
        store.close()

    # Inicializar FastAPI
    app = FastAPI(
        title="Waitlist API",
        description="API de la landing page: lista de espera por email y conteo para mostrar",
        version=API_VERSION,
        lifespan=lifespan
    )
    app.state.store = store
    app.state.registration_service = service

    # Configurar CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Errores con la forma {"error": "..."}
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        detail = exc.detail
        # Cuerpo ilegible (p. ej. UTF-8 inválido) en el alta: mismo error que un email inválido
        if (exc.status_code == 400 and request.url.path == WAITLIST_PATH
                and detail not in (INVALID_EMAIL_MESSAGE, DUPLICATE_EMAIL_MESSAGE)):
            detail = INVALID_EMAIL_MESSAGE
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": detail},
            headers=getattr(exc, "headers", None)
        )

    # Cuerpo que no es JSON válido
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": INVALID_EMAIL_MESSAGE})

    # Incluir routers
    app.include_router(waitlist.router, prefix="/api", tags=["Waitlist"])

    @app.get("/")
    def root():
        return {
            "success": True,
            "message": "Waitlist API",
            "version": API_VERSION,
            "endpoints": {
                "docs": "/docs",
                "waitlist": "/api/waitlist",
                "count": "/api/count"
            }
        }

    @app.get("/health")
    def health_check():
        return {
            "status": "healthy",
            "version": API_VERSION
        }

    return app


configure_logging()
app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=HOST, port=PORT)
