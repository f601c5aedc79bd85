# encuesta_mercado/schemas/auth.py
from typing import Optional
from pydantic import BaseModel, ConfigDict


class LoginIn(BaseModel):
    usuario: str
    password: str


class AdminOut(BaseModel):
    # Permite construir desde objetos SQLAlchemy (Pydantic v2)
    model_config = ConfigDict(from_attributes=True)

    usuario: str
    email: str


class LoginOut(BaseModel):
    mensaje: str
    user: AdminOut
    access_token: Optional[str] = None
    token_type: str = "bearer"


class RegisterIn(BaseModel):
    # Todo opcional y sin formato: el token se comprueba antes que el resto (403)
    token: str = ""
    usuario: str = ""
    email: str = ""
    password: str = ""
