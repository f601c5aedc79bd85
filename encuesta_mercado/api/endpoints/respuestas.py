# encuesta_mercado/api/endpoints/respuestas.py
import logging
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from encuesta_mercado.core.errors import ValidationGap
from encuesta_mercado.db.session import get_db
from encuesta_mercado.schemas.respuestas import MensajeOut, RespuestaIn, RespuestaOut
from encuesta_mercado.services.normalizer import missing_required_fields, normalize_submission, to_document
from encuesta_mercado.services.records import SqlRecordStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["respuestas"])


@router.post("/respuestas", response_model=MensajeOut, status_code=status.HTTP_201_CREATED)
def crear_respuesta(data: RespuestaIn, db: Session = Depends(get_db)):
    """
    Guarda una encuesta. No rechaza campos vacíos: eso lo controla el
    formulario. Solo se registra en el log qué faltó.
    """
    record = normalize_submission(data)
    missing = missing_required_fields(record)
    if missing:
        gap = ValidationGap(missing)
        logger.warning("%s: %s", gap.message, gap.details)

    SqlRecordStore(db).add(record)
    return MensajeOut(mensaje="Respuesta guardada correctamente")


@router.get("/respuestas", response_model=List[RespuestaOut], response_model_by_alias=True)
def listar_respuestas(db: Session = Depends(get_db)):
    records = SqlRecordStore(db).list_all()
    return [RespuestaOut.model_validate(to_document(r)) for r in records]
