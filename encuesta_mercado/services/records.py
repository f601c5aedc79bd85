# encuesta_mercado/services/records.py
from __future__ import annotations

import logging
from typing import Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from encuesta_mercado.core.errors import TransportFailure
from encuesta_mercado.models.respuesta import Respuesta
from encuesta_mercado.schemas.respuestas import SurveyRecord
from encuesta_mercado.services.normalizer import record_from_row, to_row_values

logger = logging.getLogger(__name__)


class RecordStore(Protocol):
    """Acceso a las encuestas guardadas: solo alta y lectura completa."""

    def add(self, record: SurveyRecord) -> SurveyRecord: ...

    def list_all(self) -> list[SurveyRecord]: ...


class SqlRecordStore:
    def __init__(self, db: Session):
        self.db = db

    def add(self, record: SurveyRecord) -> SurveyRecord:
        row = Respuesta(**to_row_values(record))
        try:
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("Error al guardar la respuesta")
            raise TransportFailure("Error al guardar la respuesta", str(e)) from e
        return record_from_row(row)

    def list_all(self) -> list[SurveyRecord]:
        try:
            rows = self.db.query(Respuesta).order_by(Respuesta.created_at.asc()).all()
        except SQLAlchemyError as e:
            logger.exception("Error al obtener respuestas")
            raise TransportFailure("Error al obtener respuestas", str(e)) from e
        return [record_from_row(r) for r in rows]
