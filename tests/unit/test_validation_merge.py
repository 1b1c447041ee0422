"""
Tests del cruce de la pestaña Validaciones con los vuelos sincronizados.
"""
from flightlog.infrastructure.external.sheets_sync.validation_merge import (
    apply_validations,
    build_validation_index,
    parse_validation_status,
)
from flightlog.shared.constants.logbook_constants import ValidationStatus

KEY = "2024-09-01|TRUJILLO|VBAS-1"


def test_last_appended_row_wins():
    index = build_validation_index([
        {"ID_VUELO": KEY, "ESTADO": "validated", "NOTA": "8"},
        {"ID_VUELO": KEY, "ESTADO": "rejected", "FEEDBACK": "Falta firma"},
    ])

    decision = index[KEY]
    assert decision.status == ValidationStatus.REJECTED
    assert decision.feedback == "Falta firma"
    assert decision.grade is None


def test_rows_without_flight_id_are_ignored():
    index = build_validation_index([{"ESTADO": "validated"}, {"ID_VUELO": "", "ESTADO": "rejected"}, "x"])
    assert index == {}


def test_unknown_status_is_pending():
    assert parse_validation_status("Validated") == ValidationStatus.VALIDATED
    assert parse_validation_status("quien sabe") == ValidationStatus.PENDING
    assert parse_validation_status(None) == ValidationStatus.PENDING


def test_apply_validations_overrides_local_state(record_factory):
    record = record_factory("r1", status=ValidationStatus.VALIDATED, grade="8")
    other = record_factory("r2", session="VBAS-2", status=ValidationStatus.REJECTED,
                        student_feedback="Repetir")

    index = build_validation_index([
        {"ID_VUELO": KEY, "ESTADO": "rejected", "FEEDBACK": "Sin firma"},
    ])
    merged = apply_validations([record, other], index)

    assert merged[0].validation_status == ValidationStatus.REJECTED
    assert merged[0].student_feedback == "Sin firma"
    assert merged[0].grade == "8"
    # Sin fila en la hoja: vuelve a pendiente y pierde el feedback local
    assert merged[1].validation_status == ValidationStatus.PENDING
    assert merged[1].student_feedback is None


def test_grade_and_remarks_from_validation_row(record_factory):
    index = build_validation_index([
        {"ID_VUELO": KEY, "ESTADO": "validated", "NOTA": 7.5, "OBS_VALIDACION": "Bien"},
    ])
    merged = apply_validations([record_factory("r1", grade="5")], index)

    assert merged[0].grade == "7.5"
    assert merged[0].validation_remarks == "Bien"
    assert merged[0].is_validated
