# encuesta_mercado/db/session.py
import logging
import re

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from encuesta_mercado.core.config import settings

logger = logging.getLogger(__name__)

def _mask(u: str) -> str:
    """Enmascara la contraseña en la URL para logs seguros"""
    return re.sub(r"://([^:]+):([^@]+)@", r"://\1:***@", u)

# Obtener URL
db_url = settings.db_url
logger.info("[DB] Using: %s", _mask(db_url))

if db_url.startswith("sqlite"):
    # SQLite (desarrollo/pruebas): sin opciones de pool
    engine = create_engine(db_url, connect_args={"check_same_thread": False}, echo=False)
else:
    engine = create_engine(
        db_url,
        pool_size=5,              # 5 conexiones concurrentes
        max_overflow=10,          # Hasta 15 total en picos
        pool_timeout=30,          # 30s para obtener conexión
        pool_recycle=1800,        # Recicla cada 30 min
        pool_pre_ping=True,       # Verifica que la conexión esté viva
        echo=False,
    )

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    """Dependency para FastAPI"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

