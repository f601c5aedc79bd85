# encuesta_mercado/schemas/respuestas.py
from __future__ import annotations
from datetime import datetime
from typing import List, Optional, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class SurveyRecord(BaseModel):
    """
    Encuesta en su forma canónica (inmutable).

    Los nombres de campo son los del dominio; los alias son los nombres que
    usa el frontend (nombre, puesto, ...). ``issues`` es un conjunto ordenado
    de etiquetas; ``rating`` se guarda como llega ('1'..'5') y se interpreta
    con ``rating_value``.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: Optional[UUID] = Field(default=None, alias="_id")
    name: str = Field(default="", alias="nombre")
    stall_number: str = Field(default="", alias="puesto")
    phone: Optional[str] = Field(default=None, alias="telefono")
    security_feeling: str = Field(default="", alias="seguridad")
    issues: tuple[str, ...] = Field(default=(), alias="problemas")
    suggestion: Optional[str] = Field(default=None, alias="sugerencia")
    rating: Optional[str] = Field(default=None, alias="calificacion")
    submitted_date: str = Field(default="", alias="fecha")
    submitted_time: str = Field(default="", alias="hora")
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")

    @property
    def rating_value(self) -> Optional[int]:
        """Calificación entera 1..5, o None si falta o no es válida."""
        try:
            value = int(str(self.rating).strip())
        except (TypeError, ValueError):
            return None
        return value if 1 <= value <= 5 else None


class RespuestaIn(BaseModel):
    """
    Cuerpo de POST /api/respuestas. Todo es opcional: la obligatoriedad la
    aplica el formulario, no el backend.
    """
    nombre: Optional[str] = None
    puesto: Optional[str] = None
    telefono: Optional[str] = None
    seguridad: Optional[str] = None
    # El formulario envía el string ya unido ("robo, iluminacion"); se acepta también lista
    problemas: Optional[Union[str, List[str]]] = None
    sugerencia: Optional[str] = None
    calificacion: Optional[Union[str, int]] = None


class RespuestaOut(BaseModel):
    """Registro tal como está guardado (problemas como string unido)."""
    model_config = ConfigDict(populate_by_name=True)

    id: UUID = Field(alias="_id")
    nombre: str = ""
    puesto: str = ""
    telefono: Optional[str] = None
    seguridad: str = ""
    problemas: str = ""
    sugerencia: Optional[str] = None
    calificacion: Optional[str] = None
    fecha: str = ""
    hora: str = ""
    createdAt: Optional[datetime] = None


class MensajeOut(BaseModel):
    mensaje: str


class IssueCountOut(BaseModel):
    problema: str
    etiqueta: str
    reportes: int


class EstadisticasOut(BaseModel):
    total: int
    promedio_calificacion: float
    problemas_reportados: int
    seguridad: dict[str, int] = Field(default_factory=dict)
    seguridad_porcentajes: dict[str, float] = Field(default_factory=dict)
    calificaciones: dict[str, int] = Field(default_factory=dict)
    problemas: dict[str, int] = Field(default_factory=dict)
    top_problemas: List[IssueCountOut] = Field(default_factory=list)


class AvisoOut(BaseModel):
    """Aviso para mostrar al usuario (ej. exportación sin datos)."""
    tipo: str = "warning"
    mensaje: str
