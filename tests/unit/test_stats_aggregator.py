"""
Tests del agregador de estadisticas: solo cuentan vuelos validados.
"""
from datetime import date

import pytest

from flightlog.application.services.stats_aggregator import StatsAggregator
from flightlog.shared.constants.logbook_constants import FlightType, ValidationStatus

V = ValidationStatus.VALIDATED


@pytest.fixture
def aggregator():
    return StatsAggregator()


def test_hour_totals_only_count_validated(aggregator, record_factory):
    records = [
        record_factory("a", minutes=90, status=V),
        record_factory("b", minutes=60, status=V, flight_type=FlightType.SIMULATOR, session="VBAS-2"),
        record_factory("c", minutes=30, status=V, flight_type=FlightType.TRAINER, session="VBAS-3"),
        record_factory("d", minutes=600, session="VBAS-4"),
        record_factory("e", minutes=600, status=ValidationStatus.REJECTED, session="VBAS-5"),
    ]

    totals = aggregator.hour_totals(records)

    assert totals.total_minutes == 180
    assert totals.real_minutes == 90
    assert totals.simulator_minutes == 60
    assert totals.trainer_minutes == 30
    assert totals.sim_trainer_minutes == 90
    assert totals.total_hours == 3.0


def test_pending_flight_does_not_change_totals(aggregator, record_factory):
    base = [record_factory("a", minutes=90, status=V)]
    before = aggregator.hour_totals(base)
    after = aggregator.hour_totals(base + [record_factory("b", minutes=45, session="VBAS-2")])
    assert before == after


def test_hour_totals_by_student_ignores_accents_and_case(aggregator, record_factory):
    records = [
        record_factory("a", student="EXPÓSITO", minutes=60, status=V),
        record_factory("b", student="GAYO", minutes=30, status=V),
    ]
    assert aggregator.hour_totals(records, "exposito").total_minutes == 60


def test_student_progress_counts_distinct_sessions_in_range(aggregator, record_factory):
    records = [
        record_factory("a", session="VBAS-1", status=V),
        record_factory("b", session="VBAS-1", status=V, flight_date=date(2024, 9, 2)),
        record_factory("c", session="vbas-2", status=V),
        record_factory("d", session="VBAS-13", status=V),   # fuera de rango
        record_factory("e", session="VBAS-0", status=V),    # fuera de rango
        record_factory("f", session="VRAD-20", status=V),
        record_factory("g", session="VPRA-1"),              # pendiente
        record_factory("h", session="LIBRE", status=V),
    ]

    progress = aggregator.student_progress(records, "TRUJILLO")
    modules = {m.code: m for m in progress.modules}

    assert modules["VBAS"].completed_sessions == [1, 2]
    assert modules["VBAS"].percentage == round(2 / 12 * 100)
    assert modules["VRAD"].completed == 1
    assert modules["VPRA"].completed == 0


def test_module_percentage_is_clamped():
    aggregator = StatsAggregator(modules={"VBAS": 2})
    progress = aggregator.student_progress([], "TRUJILLO")
    progress.modules[0].completed_sessions = [1, 2, 3]
    assert progress.modules[0].percentage == 100


def test_flight_meter_follows_roster(record_factory):
    aggregator = StatsAggregator(roster=["TRUJILLO", "GAYO"])
    records = [
        record_factory("a", minutes=120, status=V),
        record_factory("b", minutes=60, status=V, flight_type=FlightType.SIMULATOR, session="VBAS-2"),
        record_factory("c", minutes=30, status=V, flight_type=FlightType.TRAINER, session="VBAS-3"),
    ]

    meter = aggregator.flight_meter(records)

    assert [e.student_name for e in meter] == ["TRUJILLO", "GAYO"]
    assert meter[0].real_hours == 2.0
    assert meter[0].sim_hours == 1.5
    assert meter[0].total_hours == 3.5
    assert meter[0].goal_total_hours == 66
    assert meter[1].total_minutes == 0


def test_grade_summary(aggregator, record_factory):
    records = [
        record_factory("a", grade="8", status=V),
        record_factory("b", grade="4", status=V, session="VBAS-2"),
        record_factory("c", grade="APTO", status=V, session="VBAS-3"),
        record_factory("d", grade="NO APTO", status=V, session="VBAS-4"),
        record_factory("e", grade="NO EVALUABLE", status=V, session="VBAS-5"),
        record_factory("f", grade="10", session="VBAS-6"),  # pendiente
    ]

    summary = aggregator.grade_summary(records, "TRUJILLO")

    assert summary.flights == 5
    assert summary.passed == 2
    assert summary.failed == 2
    assert summary.not_evaluable == 1
    assert summary.average_grade == 6.0


@pytest.mark.parametrize("session,expected", [
    ("VBAS-3", ("VBAS", 3)),
    ("vbas-3", ("VBAS", 3)),
    ("VBAS- 1", ("VBAS", 1)),
    ("VBAS-1A", ("VBAS", 1)),
    ("VBAS-A1", None),
    ("LIBRE", None),
    ("XXXX-1", None),
])
def test_parse_session_reads_leading_number(aggregator, session, expected):
    assert aggregator.parse_session(session) == expected
