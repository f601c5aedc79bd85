# encuesta_mercado/models/administrador.py
from sqlalchemy import Column, Integer, String

from encuesta_mercado.db.base_class import Base
from encuesta_mercado.services.normalizer import format_fecha, local_now


class Administrador(Base):
    __tablename__ = "administradores"

    id = Column(Integer, primary_key=True, index=True)
    usuario = Column(String, unique=True, nullable=False)
    email = Column(String, unique=True, nullable=False)
    # Texto plano: la verificación pasa por CredentialVerifier (services/auth.py)
    password = Column(String, nullable=False)
    fecha_registro = Column(String, nullable=False, default=lambda: format_fecha(local_now()))
