# encuesta_mercado/api/deps/admin.py
from fastapi import Depends

from encuesta_mercado.core.security import get_current_admin
from encuesta_mercado.models.administrador import Administrador


def require_admin(admin: Administrador = Depends(get_current_admin)) -> Administrador:
    """
    Único control de acceso del panel: cualquier administrador registrado
    con token válido puede ver estadísticas y exportar.
    """
    return admin
