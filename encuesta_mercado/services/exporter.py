# encuesta_mercado/services/exporter.py
"""
Exportación de encuestas a CSV (y a Excel con las mismas columnas).

Exportar una lista vacía no produce archivo: devuelve un ``ExportNotice``
con el aviso para el usuario.
"""
from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from datetime import date
from io import BytesIO
from typing import Optional, Sequence, Union

from openpyxl import Workbook

from encuesta_mercado.schemas.respuestas import SurveyRecord
from encuesta_mercado.services.normalizer import local_now

CSV_HEADER = [
    "ID", "Fecha", "Hora", "Nombre", "Puesto", "Teléfono",
    "Seguridad", "Calificación", "Problemas", "Sugerencias",
]
ISSUES_DISPLAY_SEPARATOR = "; "
NO_ISSUES = "Ninguno"
NO_SUGGESTION = "Ninguna"
NO_STALL = "No especificado"
NO_PHONE = "No proporcionado"
FILENAME_PREFIX = "encuestas-seguridad-mercado"

CSV_MEDIA_TYPE = "text/csv; charset=utf-8"
XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

EMPTY_EXPORT_MESSAGE = "❌ No hay datos para exportar."


@dataclass(frozen=True)
class ExportFile:
    filename: str
    content: bytes
    media_type: str
    rows: int


@dataclass(frozen=True)
class ExportNotice:
    mensaje: str
    tipo: str = "warning"


ExportResult = Union[ExportFile, ExportNotice]


def export_filename(today: Optional[date] = None, ext: str = "csv") -> str:
    # Mismo reloj (TIMEZONE) con el que se sellan las encuestas
    today = today or local_now().date()
    return f"{FILENAME_PREFIX}-{today.isoformat()}.{ext}"


def record_row(r: SurveyRecord) -> list[str]:
    problemas = ISSUES_DISPLAY_SEPARATOR.join(r.issues) if r.issues else NO_ISSUES
    return [
        str(r.id) if r.id is not None else "",
        r.submitted_date,
        r.submitted_time,
        r.name,
        r.stall_number or NO_STALL,
        r.phone or NO_PHONE,
        r.security_feeling,
        r.rating or "",
        problemas,
        r.suggestion or NO_SUGGESTION,
    ]


def build_csv(records: Sequence[SurveyRecord]) -> str:
    """
    Cabecera sin comillas y una fila por encuesta con cada campo entre
    comillas dobles; las comillas internas se duplican.
    """
    buf = io.StringIO()
    buf.write(",".join(CSV_HEADER) + "\n")
    w = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for r in records:
        w.writerow(record_row(r))
    return buf.getvalue()


def build_xlsx(records: Sequence[SurveyRecord]) -> bytes:
    wb = Workbook()
    ws = wb.active
    ws.title = "Encuestas"
    ws.append(CSV_HEADER)
    for r in records:
        ws.append(record_row(r))
    buf = BytesIO(); wb.save(buf)
    return buf.getvalue()


def export_csv(records: Sequence[SurveyRecord], today: Optional[date] = None) -> ExportResult:
    if not records:
        return ExportNotice(mensaje=EMPTY_EXPORT_MESSAGE)
    return ExportFile(
        filename=export_filename(today, "csv"),
        content=build_csv(records).encode("utf-8"),
        media_type=CSV_MEDIA_TYPE,
        rows=len(records),
    )


def export_xlsx(records: Sequence[SurveyRecord], today: Optional[date] = None) -> ExportResult:
    if not records:
        return ExportNotice(mensaje=EMPTY_EXPORT_MESSAGE)
    return ExportFile(
        filename=export_filename(today, "xlsx"),
        content=build_xlsx(records),
        media_type=XLSX_MEDIA_TYPE,
        rows=len(records),
    )
