# encuesta_mercado/services/auth.py
"""
Login y registro de administradores.

La comparación de contraseñas pasa por un ``CredentialVerifier``; el que
viene por defecto compara texto plano. Para usar
hash basta con pasar otro verificador, sin tocar los endpoints.
"""
from __future__ import annotations

import hmac
import logging
from typing import Protocol

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from encuesta_mercado.core.config import settings
from encuesta_mercado.core.errors import AuthFailure, DuplicateCredential, TransportFailure
from encuesta_mercado.models.administrador import Administrador

logger = logging.getLogger(__name__)


class CredentialVerifier(Protocol):
    def prepare(self, password: str) -> str:
        """Valor a guardar para una contraseña nueva."""
        ...

    def verify(self, password: str, stored: str) -> bool: ...


class PlainTextVerifier:
    def prepare(self, password: str) -> str:
        return password

    def verify(self, password: str, stored: str) -> bool:
        return hmac.compare_digest(password.encode("utf-8"), stored.encode("utf-8"))


default_verifier: CredentialVerifier = PlainTextVerifier()


def authenticate(
    db: Session,
    usuario: str,
    password: str,
    verifier: CredentialVerifier = default_verifier,
) -> Administrador:
    """Devuelve el administrador o lanza AuthFailure (401)."""
    try:
        admin = db.query(Administrador).filter(Administrador.usuario == usuario).first()
    except SQLAlchemyError as e:
        logger.exception("Error en login")
        raise TransportFailure("Error en el servidor", str(e)) from e

    if not admin or not verifier.verify(password or "", admin.password):
        raise AuthFailure("Credenciales incorrectas")
    return admin


def register_admin(
    db: Session,
    *,
    token: str,
    usuario: str,
    email: str,
    password: str,
    verifier: CredentialVerifier = default_verifier,
) -> Administrador:
    """
    Crea un administrador si ``token`` coincide con ADMIN_REGISTER_TOKEN.
    Token inválido -> 403; usuario/email repetidos -> 409.
    """
    expected = settings.ADMIN_REGISTER_TOKEN
    if not expected or not hmac.compare_digest((token or "").encode("utf-8"), expected.encode("utf-8")):
        raise AuthFailure("Token de autorización inválido", status_code=403)

    admin = Administrador(usuario=usuario, email=email, password=verifier.prepare(password))
    try:
        db.add(admin)
        db.commit()
        db.refresh(admin)
    except IntegrityError as e:
        db.rollback()
        logger.info("Registro duplicado: usuario=%s email=%s", usuario, email)
        raise DuplicateCredential() from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Error al registrar administrador")
        raise TransportFailure("Error al registrar administrador", str(e)) from e
    return admin
