# encuesta_mercado/api/endpoints/auth.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from encuesta_mercado.core.security import create_access_token
from encuesta_mercado.db.session import get_db
from encuesta_mercado.schemas.auth import AdminOut, LoginIn, LoginOut, RegisterIn
from encuesta_mercado.schemas.respuestas import MensajeOut
from encuesta_mercado.services.auth import authenticate, register_admin

router = APIRouter(tags=["auth"])


@router.post("/login", response_model=LoginOut)
def login(data: LoginIn, db: Session = Depends(get_db)):
    """
    Login del panel por usuario y contraseña. Además del usuario devuelve
    un token para las rutas /api/admin/*.
    """
    admin = authenticate(db, data.usuario.strip(), data.password)
    token = create_access_token({"sub": str(admin.id), "usuario": admin.usuario})
    return LoginOut(
        mensaje="Login exitoso",
        user=AdminOut.model_validate(admin),
        access_token=token,
    )


@router.post("/register", response_model=MensajeOut, status_code=status.HTTP_201_CREATED)
def register(data: RegisterIn, db: Session = Depends(get_db)):
    register_admin(
        db,
        token=data.token,
        usuario=data.usuario.strip(),
        email=data.email.strip().lower(),
        password=data.password,
    )
    return MensajeOut(mensaje="Administrador registrado exitosamente")
