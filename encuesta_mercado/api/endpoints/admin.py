# encuesta_mercado/api/endpoints/admin.py
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from starlette.responses import StreamingResponse
from sqlalchemy.orm import Session

from encuesta_mercado.api.deps.admin import require_admin
from encuesta_mercado.core.errors import NotImplementedOperation
from encuesta_mercado.db.session import get_db
from encuesta_mercado.schemas.respuestas import AvisoOut, EstadisticasOut, IssueCountOut
from encuesta_mercado.services.dashboard import AdminDashboard
from encuesta_mercado.services.exporter import ExportFile, ExportResult
from encuesta_mercado.services.normalizer import ISSUE_LABELS
from encuesta_mercado.services.records import SqlRecordStore

router = APIRouter(prefix="/admin", tags=["admin"])


def _dashboard(db: Session) -> AdminDashboard:
    dashboard = AdminDashboard(SqlRecordStore(db))
    dashboard.refresh()
    return dashboard


def _file_response(result: ExportResult):
    if not isinstance(result, ExportFile):
        return JSONResponse(AvisoOut(tipo=result.tipo, mensaje=result.mensaje).model_dump())
    return StreamingResponse(
        iter([result.content]),
        media_type=result.media_type,
        headers={"Content-Disposition": f'attachment; filename="{result.filename}"'},
    )


@router.get("/estadisticas", response_model=EstadisticasOut)
def estadisticas(db: Session = Depends(get_db), _admin=Depends(require_admin)):
    stats = _dashboard(db).stats()
    return EstadisticasOut(
        total=stats.total,
        promedio_calificacion=stats.average_rating,
        problemas_reportados=stats.distinct_issue_count,
        seguridad=stats.security_feeling_counts,
        seguridad_porcentajes=stats.security_feeling_percentages,
        calificaciones=stats.rating_counts,
        problemas=stats.issue_counts,
        top_problemas=[
            IssueCountOut(problema=p, etiqueta=ISSUE_LABELS.get(p, p), reportes=n)
            for p, n in stats.top_issues
        ],
    )


@router.get("/exportar.csv")
def exportar_csv(db: Session = Depends(get_db), _admin=Depends(require_admin)):
    return _file_response(_dashboard(db).export_csv())


@router.get("/exportar.xlsx")
def exportar_xlsx(db: Session = Depends(get_db), _admin=Depends(require_admin)):
    return _file_response(_dashboard(db).export_xlsx())


@router.delete("/respuestas")
def limpiar_respuestas(_admin=Depends(require_admin)):
    """
    Borrar todas las encuestas del servidor no está implementado: el panel
    solo puede vaciar su vista local (AdminDashboard.clear).
    """
    raise NotImplementedOperation(
        "Eliminación no disponible",
        "Las encuestas guardadas no se borran desde la API; solo se puede limpiar la vista local.",
    )
