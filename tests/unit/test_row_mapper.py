"""
Tests del mapeo de filas de la hoja central a FlightLogRecord.
"""
from datetime import date

import pytest

from flightlog.domain.entities.flight_log import Approach
from flightlog.infrastructure.external.sheets_sync.row_mapper import (
    effective_flight_type,
    encode_approaches,
    map_flight_row,
    map_flight_rows,
    parse_approaches,
    parse_duration_minutes,
    parse_flight_type,
)
from flightlog.infrastructure.external.sheets_sync.types import MalformedRowError
from flightlog.shared.constants.logbook_constants import FlightType, ValidationStatus


def _row(**overrides):
    row = {
        "ALUMNO": "TRUJILLO",
        "SESIÓN": "VBAS-1",
        "FECHA": "01/09/2024",
        "INSTRUCTOR": "PRIETO",
        "MATRÍCULA": "HE.25-10",
        "TIEMPO": "1.5",
        "REAL / SIM": "R",
        "PUNTUACIÓN": "",
        "OBSERVACIONES": "",
    }
    row.update(overrides)
    return row


def test_map_flight_row_basic_scenario():
    record = map_flight_row(_row())

    assert record.date == date(2024, 9, 1)
    assert record.student_name == "TRUJILLO"
    assert record.session == "VBAS-1"
    assert record.total_time == 90
    assert record.flight_type == FlightType.REAL
    assert record.validation_status == ValidationStatus.PENDING
    assert record.id == ""


def test_map_flight_row_keeps_extra_columns():
    record = map_flight_row(_row(**{
        "LUGAR SALIDA": "LEGR",
        "LUGAR LLEGADA": "LEBA",
        "PROCEDIMIENTOS": "Emergencias",
        "OBSERVACIONES": "Buen vuelo",
        "MANIOBRAS": "2x ILS @ LEGR",
    }))

    assert record.departure_place == "LEGR"
    assert record.arrival_place == "LEBA"
    assert record.procedures == "Emergencias"
    assert record.remarks == "Buen vuelo"
    assert record.aircraft_registration == "HE.25-10"
    assert record.approaches == [Approach(type="ILS", count=2, place="LEGR")]


@pytest.mark.parametrize("raw,expected", [
    (1.5, 90),
    ("1,5", 90),
    ("0.75", 45),
    ("", 0),
    (None, 0),
    (2, 120),
    ("0.0083", 0),
    ("0.125", 8),  # 7.5 min -> redondeo hacia arriba
])
def test_parse_duration_minutes(raw, expected):
    assert parse_duration_minutes(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "-1", "nan", "inf", "1e18", "24.5"])
def test_parse_duration_minutes_rejects_invalid(raw):
    with pytest.raises(ValueError):
        parse_duration_minutes(raw)


@pytest.mark.parametrize("code,expected", [
    ("R", FlightType.REAL),
    ("s", FlightType.SIMULATOR),
    ("E", FlightType.TRAINER),
    ("", FlightType.REAL),
    ("X", FlightType.REAL),
])
def test_parse_flight_type(code, expected):
    assert parse_flight_type(code) == expected


def test_grade_is_always_text():
    assert map_flight_row(_row(**{"PUNTUACIÓN": 8.0})).grade == "8"
    assert map_flight_row(_row(**{"PUNTUACIÓN": 7.5})).grade == "7.5"
    assert map_flight_row(_row(**{"PUNTUACIÓN": "APTO"})).grade == "APTO"
    assert map_flight_row(_row(**{"PUNTUACIÓN": None})).grade == ""


def test_parse_approaches_skips_unrecognized_entries():
    approaches = parse_approaches("2x ILS @ LEGR, basura, 1x vor @ LEBA, 3x NDB")
    assert approaches == [
        Approach(type="ILS", count=2, place="LEGR"),
        Approach(type="VOR", count=1, place="LEBA"),
    ]
    assert parse_approaches("") == []


def test_encode_approaches_matches_sheet_format(sample_approaches):
    text = encode_approaches(sample_approaches)
    assert text == "2x ILS @ LEGR, 1x VOR @ LEBA"
    assert parse_approaches(text) == sample_approaches


@pytest.mark.parametrize("overrides", [
    {"FECHA": ""},
    {"FECHA": "no es fecha"},
    {"ALUMNO": "  "},
    {"SESIÓN": None},
    {"TIEMPO": "mucho"},
    {"TIEMPO": "-2"},
    {"TIEMPO": "1e18"},
])
def test_map_flight_row_malformed(overrides):
    with pytest.raises(MalformedRowError):
        map_flight_row(_row(**overrides))


def test_map_flight_rows_isolates_malformed_rows():
    rows = [
        _row(),
        _row(FECHA="basura"),
        "ni siquiera un objeto",
        _row(**{"SESIÓN": "VBAS-2", "FECHA": "02/09/2024"}),
    ]

    result = map_flight_rows(rows)

    assert [r.session for r in result.records] == ["VBAS-1", "VBAS-2"]
    assert len(result.rejected) == 2


def test_oversized_duration_does_not_abort_batch():
    result = map_flight_rows([_row(), _row(**{"SESIÓN": "VBAS-2", "TIEMPO": "1e18"})])

    assert [r.session for r in result.records] == ["VBAS-1"]
    assert len(result.rejected) == 1


def test_simulator_registration_forces_simulator_type():
    assert effective_flight_type(FlightType.REAL, " et-105 ") == FlightType.SIMULATOR
    assert effective_flight_type(FlightType.TRAINER, "ET-106") == FlightType.SIMULATOR
    assert effective_flight_type(FlightType.REAL, "HE.25-10") == FlightType.REAL
