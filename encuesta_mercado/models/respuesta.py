# encuesta_mercado/models/respuesta.py
import uuid
from sqlalchemy import Column, String, Text, DateTime, Uuid, func

from encuesta_mercado.db.base_class import Base

class Respuesta(Base):
    """Una encuesta enviada por un comerciante. Solo se crea y se lee."""
    __tablename__ = "respuestas"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    nombre = Column(String, nullable=True)
    puesto = Column(String, nullable=True)
    telefono = Column(String, nullable=True)
    seguridad = Column(String, nullable=True)      # 'sí' | 'no' | 'regular'
    problemas = Column(Text, nullable=True)        # etiquetas unidas con ", "
    sugerencia = Column(Text, nullable=True)
    calificacion = Column(String, nullable=True)   # '1'..'5' tal como llega del formulario
    fecha = Column(String, nullable=True)          # d/m/aaaa (es-ES)
    hora = Column(String, nullable=True)           # H:MM:SS (es-ES)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
