# encuesta_mercado/services/aggregator.py
"""
Estadísticas del panel de administración.

Todo es un recorrido puro sobre la lista de encuestas: se recalcula en cada
carga y ningún registro mal formado interrumpe el cálculo.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from encuesta_mercado.schemas.respuestas import SurveyRecord

TOP_ISSUES_LIMIT = 5


@dataclass(frozen=True)
class SurveyStats:
    total: int
    security_feeling_counts: dict[str, int] = field(default_factory=dict)
    rating_counts: dict[str, int] = field(default_factory=dict)
    issue_counts: dict[str, int] = field(default_factory=dict)
    average_rating: float = 0.0
    top_issues: list[tuple[str, int]] = field(default_factory=list)

    @property
    def distinct_issue_count(self) -> int:
        return len(self.issue_counts)

    @property
    def security_feeling_percentages(self) -> dict[str, float]:
        return percentages(self.security_feeling_counts, self.total)


def count_by(values: Iterable[str]) -> dict[str, int]:
    """Frecuencias en orden de aparición; ignora valores vacíos."""
    counts: dict[str, int] = {}
    for v in values:
        if v is None or v == "":
            continue
        counts[v] = counts.get(v, 0) + 1
    return counts


def count_issues(records: Iterable[SurveyRecord]) -> dict[str, int]:
    """Cada encuesta suma 1 a cada problema que marcó."""
    counts: dict[str, int] = {}
    for r in records:
        for tag in dict.fromkeys(r.issues):
            counts[tag] = counts.get(tag, 0) + 1
    return counts


def average_rating(records: Sequence[SurveyRecord]) -> float:
    """
    Suma de calificaciones válidas dividida por el total de encuestas, con
    un decimal. Las calificaciones ausentes o inválidas suman 0 pero cuentan
    en el divisor. Sin encuestas el promedio es 0.
    """
    if not records:
        return 0.0
    total = sum(r.rating_value or 0 for r in records)
    return round(total / len(records), 1)


def top_issues(issue_counts: dict[str, int], limit: int = TOP_ISSUES_LIMIT) -> list[tuple[str, int]]:
    # sorted() es estable: los empates conservan el orden de aparición
    ranked = sorted(issue_counts.items(), key=lambda kv: kv[1], reverse=True)
    return ranked[:limit]


def percentages(counts: dict[str, int], total: int) -> dict[str, float]:
    if total <= 0:
        return {k: 0.0 for k in counts}
    return {k: round(v / total * 100, 1) for k, v in counts.items()}


def aggregate(records: Iterable[SurveyRecord]) -> SurveyStats:
    records = tuple(records)
    issue_counts = count_issues(records)
    return SurveyStats(
        total=len(records),
        security_feeling_counts=count_by(r.security_feeling for r in records),
        rating_counts=count_by(r.rating for r in records),
        issue_counts=issue_counts,
        average_rating=average_rating(records),
        top_issues=top_issues(issue_counts),
    )
