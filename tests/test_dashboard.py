import pytest

from encuesta_mercado.core.errors import TransportFailure
from encuesta_mercado.schemas.respuestas import SurveyRecord
from encuesta_mercado.services.dashboard import AdminDashboard
from encuesta_mercado.services.exporter import ExportFile, ExportNotice


class MemoryStore:
    def __init__(self, records=()):
        self.records = list(records)
        self.fail = False

    def add(self, record):
        self.records.append(record)
        return record

    def list_all(self):
        if self.fail:
            raise ConnectionError("servidor no disponible")
        return list(self.records)


@pytest.fixture
def store():
    return MemoryStore([
        SurveyRecord(rating="5", security_feeling="sí", issues=("robo",)),
        SurveyRecord(rating="3", security_feeling="no"),
    ])


def test_refresh_and_stats(store):
    dashboard = AdminDashboard(store)
    assert dashboard.records == ()

    dashboard.refresh()
    stats = dashboard.stats()
    assert stats.total == 2
    assert stats.average_rating == 4.0
    assert stats.issue_counts == {"robo": 1}


def test_failed_refresh_keeps_previous_snapshot(store):
    dashboard = AdminDashboard(store)
    dashboard.refresh()

    store.fail = True
    with pytest.raises(TransportFailure) as exc:
        dashboard.refresh()
    assert "servidor no disponible" in exc.value.details
    assert len(dashboard.records) == 2


def test_clear_is_local_only(store):
    dashboard = AdminDashboard(store)
    dashboard.refresh()

    assert dashboard.clear() == 2
    assert dashboard.records == ()
    assert dashboard.stats().total == 0
    # el almacenamiento conserva todo
    assert len(store.list_all()) == 2
    dashboard.refresh()
    assert len(dashboard.records) == 2


def test_export_after_clear_warns(store):
    dashboard = AdminDashboard(store)
    dashboard.refresh()
    assert isinstance(dashboard.export_csv(), ExportFile)

    dashboard.clear()
    assert isinstance(dashboard.export_csv(), ExportNotice)
