"""
Configuración de pruebas: SQLite en memoria y TestClient de FastAPI.
"""
import os

# Variables de entorno antes de importar la app
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ADMIN_REGISTER_TOKEN"] = "token-de-prueba"
os.environ["JWT_SECRET"] = "test-jwt-secret"
os.environ["TIMEZONE"] = "America/Bogota"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from encuesta_mercado.db.base import Base
from encuesta_mercado.db.session import get_db
from encuesta_mercado.main import app

REGISTER_TOKEN = "token-de-prueba"

test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestSessionLocal = sessionmaker(bind=test_engine, autocommit=False, autoflush=False)


@pytest.fixture
def db_session():
    """Base limpia para cada prueba"""
    Base.metadata.create_all(bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def admin_data():
    return {
        "token": REGISTER_TOKEN,
        "usuario": "admin",
        "email": "admin@mercado.com",
        "password": "clave123",
    }


@pytest.fixture
def auth_headers(client, admin_data):
    """Registra un administrador y devuelve el header con su token"""
    r = client.post("/api/register", json=admin_data)
    assert r.status_code == 201
    r = client.post("/api/login", json={"usuario": admin_data["usuario"], "password": admin_data["password"]})
    assert r.status_code == 200
    return {"Authorization": f"Bearer {r.json()['access_token']}"}


@pytest.fixture
def encuesta():
    return {
        "nombre": "María Pérez",
        "puesto": "A-15",
        "telefono": "3001234567",
        "seguridad": "sí",
        "problemas": "robo, iluminacion",
        "sugerencia": "Más cámaras",
        "calificacion": "5",
    }
