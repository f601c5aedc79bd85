import importlib.util
from datetime import datetime
from pathlib import Path

import pytest

from encuesta_mercado.schemas.respuestas import RespuestaIn
from encuesta_mercado.services.normalizer import normalize_submission
from encuesta_mercado.services.records import SqlRecordStore

from conftest import TestSessionLocal

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "export_csv.py"


@pytest.fixture
def export_script(db_session, monkeypatch):
    spec = importlib.util.spec_from_file_location("export_csv", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    monkeypatch.setattr(module, "SessionLocal", TestSessionLocal)
    return module


def test_empty_store_writes_nothing(export_script, tmp_path):
    assert export_script.main(["--out", str(tmp_path)]) == 1
    assert list(tmp_path.iterdir()) == []


def test_writes_csv_file(export_script, db_session, tmp_path):
    store = SqlRecordStore(db_session)
    store.add(normalize_submission(
        RespuestaIn(nombre="Ana", problemas="robo", calificacion="5", sugerencia='Dijo "ya"'),
        now=datetime(2026, 10, 18, 8, 0, 0),
    ))

    path = export_script.export(tmp_path)
    assert path is not None
    assert path.name.startswith("encuestas-seguridad-mercado-")
    text = path.read_text(encoding="utf-8")
    assert text.splitlines()[1].endswith('"5","robo","Dijo ""ya"""')
