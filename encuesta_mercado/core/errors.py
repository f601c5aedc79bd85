# encuesta_mercado/core/errors.py
"""
Errores del dominio y su traducción a respuestas JSON.

Los endpoints lanzan estas excepciones; los handlers registrados en
``main.py`` las convierten al cuerpo que espera el frontend
(``{error, details}`` o ``{mensaje}``).
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class EncuestaError(Exception):
    """Base de todos los errores de la aplicación."""

    status_code: int = 500

    def __init__(self, message: str, details: Optional[str] = None):
        self.message = message
        self.details = details
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.message}
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationGap(EncuestaError):
    """Campo requerido vacío. Es solo informativo: el normalizador no lo lanza."""

    status_code = 422

    def __init__(self, fields: list[str]):
        self.fields = list(fields)
        super().__init__("Campos requeridos vacíos", ", ".join(self.fields))


class TransportFailure(EncuestaError):
    """La base de datos no respondió o falló la operación."""

    status_code = 500


class AuthFailure(EncuestaError):
    """Credenciales incorrectas o token de registro inválido."""

    status_code = 401

    def __init__(self, message: str = "Credenciales incorrectas", status_code: int = 401):
        super().__init__(message)
        self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        return {"mensaje": self.message}


class DuplicateCredential(EncuestaError):
    """Usuario o email ya registrados."""

    status_code = 409

    def __init__(self, message: str = "Usuario o email ya existen"):
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"mensaje": self.message}


class NotImplementedOperation(EncuestaError):
    status_code = 501


async def _encuesta_error_handler(request: Request, exc: EncuestaError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.details or exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Error no controlado en %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Error en el servidor", "details": str(exc)})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(EncuestaError, _encuesta_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
