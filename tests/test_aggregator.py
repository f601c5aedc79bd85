from encuesta_mercado.schemas.respuestas import SurveyRecord
from encuesta_mercado.services.aggregator import aggregate, average_rating, top_issues
from encuesta_mercado.services.normalizer import split_issues


def rec(rating=None, issues="", seguridad=""):
    return SurveyRecord(rating=rating, issues=split_issues(issues), security_feeling=seguridad)


def test_example_scenario():
    records = [rec("5", "robo, iluminacion"), rec("3", ""), rec("4", "robo")]
    stats = aggregate(records)

    assert stats.total == 3
    assert stats.average_rating == 4.0
    assert stats.issue_counts == {"robo": 2, "iluminacion": 1}
    assert stats.top_issues == [("robo", 2), ("iluminacion", 1)]
    assert stats.rating_counts == {"5": 1, "3": 1, "4": 1}
    assert stats.distinct_issue_count == 2


def test_security_feeling_counts_and_percentages():
    records = [rec(seguridad=s) for s in ["sí", "no", "sí", "regular"]]
    stats = aggregate(records)

    assert stats.security_feeling_counts == {"sí": 2, "no": 1, "regular": 1}
    assert list(stats.security_feeling_counts) == ["sí", "no", "regular"]
    assert stats.security_feeling_percentages == {"sí": 50.0, "no": 25.0, "regular": 25.0}


def test_empty_sequence():
    stats = aggregate([])
    assert stats.total == 0
    assert stats.average_rating == 0
    assert stats.security_feeling_counts == {}
    assert stats.issue_counts == {}
    assert stats.top_issues == []


def test_invalid_ratings_count_in_divisor_only():
    records = [rec("5"), rec("abc"), rec(None), rec("4")]
    # (5 + 0 + 0 + 4) / 4 = 2.25 -> 2.2
    assert average_rating(records) == round(9 / 4, 1)
    stats = aggregate(records)
    assert stats.rating_counts == {"5": 1, "abc": 1, "4": 1}


def test_average_times_total_matches_sum():
    records = [rec(str(r)) for r in [1, 2, 2, 5, 4, 3, 5]]
    stats = aggregate(records)
    total = sum(r.rating_value for r in records)
    assert abs(stats.average_rating * stats.total - total) <= 0.05 * stats.total


def test_issue_counts_sum_equals_record_tag_pairs():
    records = [
        rec(issues="robo, iluminacion, vigilancia"),
        rec(issues=""),
        rec(issues="robo"),
        rec(issues="acceso, otros"),
    ]
    stats = aggregate(records)
    pairs = sum(len(r.issues) for r in records)
    with_issues = sum(1 for r in records if r.issues)

    assert sum(stats.issue_counts.values()) == pairs == 6
    assert sum(stats.issue_counts.values()) >= with_issues


def test_duplicate_tag_in_one_record_counts_once():
    record = SurveyRecord(issues=("robo", "robo"))
    assert aggregate([record]).issue_counts == {"robo": 1}


def test_top_issues_stable_ties_and_limit():
    counts = {"otros": 1, "robo": 3, "acceso": 1, "vigilancia": 3, "emergencia": 2, "iluminacion": 1}
    assert top_issues(counts) == [
        ("robo", 3),
        ("vigilancia", 3),
        ("emergencia", 2),
        ("otros", 1),
        ("acceso", 1),
    ]
