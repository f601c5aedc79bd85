# encuesta_mercado/services/dashboard.py
from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from encuesta_mercado.core.errors import TransportFailure
from encuesta_mercado.schemas.respuestas import SurveyRecord
from encuesta_mercado.services.aggregator import SurveyStats, aggregate
from encuesta_mercado.services.exporter import ExportResult, export_csv, export_xlsx
from encuesta_mercado.services.records import RecordStore

logger = logging.getLogger(__name__)


class AdminDashboard:
    """
    Vista del panel: una instantánea inmutable de las encuestas.

    ``refresh`` reemplaza la instantánea completa o no la toca si falla la
    lectura. ``clear`` solo vacía la vista local; los datos guardados no se
    borran.
    """

    def __init__(self, store: RecordStore):
        self.store = store
        self._records: tuple[SurveyRecord, ...] = ()

    @property
    def records(self) -> tuple[SurveyRecord, ...]:
        return self._records

    def refresh(self) -> tuple[SurveyRecord, ...]:
        try:
            records = tuple(self.store.list_all())
        except TransportFailure:
            raise
        except Exception as e:
            logger.exception("Error al cargar datos del servidor")
            raise TransportFailure("Error al cargar datos del servidor", str(e)) from e
        self._records = records
        logger.info("Datos del servidor cargados: %d encuestas", len(records))
        return records

    def stats(self) -> SurveyStats:
        return aggregate(self._records)

    def export_csv(self, today: Optional[date] = None) -> ExportResult:
        return export_csv(self._records, today)

    def export_xlsx(self, today: Optional[date] = None) -> ExportResult:
        return export_xlsx(self._records, today)

    def clear(self) -> int:
        """Vacía la vista local y devuelve cuántas encuestas se quitaron."""
        removed = len(self._records)
        self._records = ()
        logger.warning("Vista local vaciada (%d encuestas); el almacenamiento no se modifica", removed)
        return removed
