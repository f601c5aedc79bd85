# encuesta_mercado/db/base.py
from encuesta_mercado.db.base_class import Base  # noqa: F401

# Importa todos los modelos que definen tablas para registrar su metadata
from encuesta_mercado.models import respuesta  # noqa: F401
from encuesta_mercado.models import administrador  # noqa: F401
