import os

# Configuración de base de datos (SQLite en archivo, se crea en el primer arranque)
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./waitlist.db")

# SQLite: segundos de espera cuando otro hilo tiene el archivo bloqueado
SQLITE_BUSY_TIMEOUT = float(os.getenv("SQLITE_BUSY_TIMEOUT", "15"))

# Desplazamiento fijo sumado al conteo real en /api/count ("social proof").
# No es un dato calculado: infla el número mostrado a propósito.
DISPLAY_COUNT_OFFSET = int(os.getenv("DISPLAY_COUNT_OFFSET", "1240"))

# Servidor
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
API_VERSION = "1.0.0"

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Configuración de CORS
_origins = os.getenv("ALLOWED_ORIGINS")
ALLOWED_ORIGINS = [o.strip() for o in _origins.split(",") if o.strip()] if _origins else [
    "http://localhost:5173",
    "http://localhost",
    "http://localhost:3000"
]

# Mensajes devueltos al cliente
WELCOME_MESSAGE = "Welcome to the future."
INVALID_EMAIL_MESSAGE = "Invalid email"
DUPLICATE_EMAIL_MESSAGE = "You're already on the list!"
INTERNAL_ERROR_MESSAGE = "Something went wrong"
