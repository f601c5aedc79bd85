# encuesta_mercado/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from encuesta_mercado.core.config import settings
from encuesta_mercado.core.errors import register_error_handlers
from encuesta_mercado.api.endpoints import admin, auth, health, respuestas

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

API_PREFIX = "/api"

app = FastAPI(
    title=settings.APP_NAME,
    description="API de la encuesta de seguridad del mercado",
    version="1.0.0",
)

# CORS (en prod: define CORS_ORIGINS)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(health.router,     prefix=API_PREFIX)
app.include_router(respuestas.router, prefix=API_PREFIX)
app.include_router(auth.router,       prefix=API_PREFIX)
app.include_router(admin.router,      prefix=API_PREFIX)


@app.get("/health")
def health_root():
    return {"status": "ok", "message": "API funcionando correctamente"}


@app.get("/")
def root():
    return {
        "message": "API de la Encuesta de Seguridad del Mercado",
        "version": "1.0.0",
        "docs": "/docs",
        "api": API_PREFIX,
    }


def run() -> None:
    import uvicorn

    logger.info("Servidor en http://localhost:%s", settings.PORT)
    uvicorn.run("encuesta_mercado.main:app", host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    run()
