# encuesta_mercado/services/normalizer.py
"""
Paso de la entrada del formulario a la forma canónica de una encuesta, y
de una fila guardada de vuelta a ``SurveyRecord``.

No valida: un formulario con campos vacíos produce igualmente un registro.
``missing_required_fields`` informa qué faltó, sin rechazar nada.
"""
from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import Any, Iterable, Optional, Union
from zoneinfo import ZoneInfo

from encuesta_mercado.core.config import settings
from encuesta_mercado.schemas.respuestas import RespuestaIn, SurveyRecord

ISSUE_SEPARATOR = ", "

# Vocabulario fijo de problemas (valor -> etiqueta del panel)
ISSUE_LABELS: dict[str, str] = {
    "robo": "🔓 Robos/hurtos",
    "iluminacion": "💡 Mala iluminación",
    "vigilancia": "👮 Falta vigilancia",
    "acceso": "🚪 Control acceso",
    "emergencia": "🚨 Plan emergencias",
    "otros": "📝 Otros",
}

REQUIRED_FIELDS = ("name", "stall_number", "security_feeling", "rating")


def _norm(s: Any) -> str:
    return "" if s is None else str(s).strip()


# ---------- fecha / hora (formato es-ES) ----------

def format_fecha(d: date) -> str:
    """'18/10/2026', '5/1/2026' (día y mes sin ceros)."""
    return f"{d.day}/{d.month}/{d.year}"


def format_hora(t: Union[time, datetime]) -> str:
    """'9:05:03' (hora sin cero, minutos y segundos con dos dígitos)."""
    return f"{t.hour}:{t.minute:02d}:{t.second:02d}"


def local_now() -> datetime:
    return datetime.now(ZoneInfo(settings.TIMEZONE))


# ---------- problemas ----------

def split_issues(joined: Optional[str]) -> tuple[str, ...]:
    """Separa el string guardado; descarta tokens vacíos y repetidos."""
    return _unique(_norm(tok) for tok in _norm(joined).split(ISSUE_SEPARATOR))


def join_issues(issues: Iterable[str]) -> str:
    return ISSUE_SEPARATOR.join(_unique(issues))


def _unique(tags: Iterable[str]) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for tag in tags:
        tag = _norm(tag)
        if tag:
            seen.setdefault(tag, None)
    return tuple(seen)


def coerce_issues(raw: Union[str, Iterable[str], None]) -> tuple[str, ...]:
    """
    Acepta la lista de casillas marcadas (en el orden en que se marcaron) o
    el string ya unido. Una casilla que contenga el separador se parte en
    sus etiquetas para que el guardado siga siendo reversible.
    """
    if raw is None:
        return ()
    if isinstance(raw, str):
        return split_issues(raw)
    tags: list[str] = []
    for item in raw:
        tags.extend(split_issues(item))
    return _unique(tags)


# ---------- entrada del formulario ----------

def normalize_submission(data: RespuestaIn, now: Optional[datetime] = None) -> SurveyRecord:
    """
    Construye el registro a guardar. ``fecha``/``hora`` se sellan con el
    reloj local en el momento del envío; ``id`` y ``createdAt`` los asigna
    la base de datos.
    """
    now = now or local_now()
    rating = _norm(data.calificacion)
    return SurveyRecord(
        name=_norm(data.nombre),
        stall_number=_norm(data.puesto),
        phone=_norm(data.telefono) or None,
        security_feeling=_norm(data.seguridad),
        issues=coerce_issues(data.problemas),
        suggestion=_norm(data.sugerencia) or None,
        rating=rating or None,
        submitted_date=format_fecha(now),
        submitted_time=format_hora(now),
    )


def missing_required_fields(record: SurveyRecord) -> list[str]:
    """Campos obligatorios vacíos (solo informativo)."""
    return [f for f in REQUIRED_FIELDS if not _norm(getattr(record, f))]


def to_row_values(record: SurveyRecord) -> dict[str, Any]:
    """Valores de columna para el modelo ``Respuesta``."""
    return {
        "nombre": record.name,
        "puesto": record.stall_number,
        "telefono": record.phone,
        "seguridad": record.security_feeling,
        "problemas": join_issues(record.issues),
        "sugerencia": record.suggestion,
        "calificacion": record.rating,
        "fecha": record.submitted_date,
        "hora": record.submitted_time,
    }


# ---------- lectura ----------

def record_from_row(row: Any) -> SurveyRecord:
    """
    Fila guardada -> ``SurveyRecord``. Si faltan fecha/hora (registros
    antiguos) se derivan de ``created_at`` en la zona configurada.
    """
    created_at = getattr(row, "created_at", None)
    fecha = _norm(getattr(row, "fecha", None))
    hora = _norm(getattr(row, "hora", None))
    if created_at is not None and (not fecha or not hora):
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        local = created_at.astimezone(ZoneInfo(settings.TIMEZONE))
        fecha = fecha or format_fecha(local)
        hora = hora or format_hora(local)

    return SurveyRecord(
        id=getattr(row, "id", None),
        name=_norm(getattr(row, "nombre", None)),
        stall_number=_norm(getattr(row, "puesto", None)),
        phone=_norm(getattr(row, "telefono", None)) or None,
        security_feeling=_norm(getattr(row, "seguridad", None)),
        issues=split_issues(getattr(row, "problemas", None)),
        suggestion=getattr(row, "sugerencia", None) or None,
        rating=_norm(getattr(row, "calificacion", None)) or None,
        submitted_date=fecha,
        submitted_time=hora,
        created_at=created_at,
    )


def to_document(record: SurveyRecord) -> dict[str, Any]:
    """Forma pública de un registro (la que devuelve GET /api/respuestas)."""
    return {
        "id": record.id,
        "nombre": record.name,
        "puesto": record.stall_number,
        "telefono": record.phone,
        "seguridad": record.security_feeling,
        "problemas": join_issues(record.issues),
        "sugerencia": record.suggestion,
        "calificacion": record.rating,
        "fecha": record.submitted_date,
        "hora": record.submitted_time,
        "createdAt": record.created_at,
    }
