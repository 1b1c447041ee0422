"""
Tests del pipeline hoja central -> almacen local.
"""
from datetime import date
from unittest.mock import MagicMock

import pytest

from flightlog.infrastructure.external.sheets_sync.sheets_client import SheetsClient
from flightlog.infrastructure.external.sheets_sync.sync_service import (
    LogbookSync,
    StoreReplaceError,
)
from flightlog.infrastructure.external.sheets_sync.types import SheetsApiError
from flightlog.shared.constants.logbook_constants import ValidationStatus

KEY = "2024-09-01|TRUJILLO|VBAS-1"

FLIGHT_ROWS = [
    {"ALUMNO": "TRUJILLO", "SESIÓN": "VBAS-1", "FECHA": "01/09/2024", "TIEMPO": "1.5", "REAL / SIM": "R"},
    {"ALUMNO": "GAYO", "SESIÓN": "VRAD-3", "FECHA": "2024-09-02T22:00:00.000Z", "TIEMPO": 1, "REAL / SIM": "S"},
]


def _client(flights, validations=None) -> MagicMock:
    client = MagicMock(spec=SheetsClient)
    client.fetch_flights.return_value = flights
    client.fetch_validations.return_value = validations or []
    return client


def test_sync_replaces_store(sql_store):
    service = LogbookSync(store=sql_store, client=_client(FLIGHT_ROWS))

    result = service.run_once()

    assert result.applied
    assert result.imported == 2
    assert result.pending == 2
    by_student = {r.student_name: r for r in sql_store.list()}
    assert by_student["TRUJILLO"].total_time == 90
    assert by_student["GAYO"].date == date(2024, 9, 3)


def test_sync_twice_keeps_ids(sql_store):
    service = LogbookSync(store=sql_store, client=_client(FLIGHT_ROWS))

    service.run_once()
    first = {r.composite_key(): r.id for r in sql_store.list()}
    service.run_once()
    second = {r.composite_key(): r.id for r in sql_store.list()}

    assert first == second


def test_cloud_wins_over_local_validation(sql_store, record_factory):
    # Validado localmente con "8", pero la hoja tiene un rechazo posterior
    sql_store.put(record_factory("local-1", grade="8", status=ValidationStatus.VALIDATED))
    validations = [
        {"ID_VUELO": KEY, "ESTADO": "validated", "NOTA": "8"},
        {"ID_VUELO": KEY, "ESTADO": "rejected", "FEEDBACK": "Revisar tiempos"},
    ]
    service = LogbookSync(store=sql_store, client=_client(FLIGHT_ROWS, validations))

    service.run_once()

    record = sql_store.get("local-1")
    assert record.validation_status == ValidationStatus.REJECTED
    assert record.student_feedback == "Revisar tiempos"


def test_local_validation_not_in_sheet_reverts_to_pending(sql_store, record_factory):
    sql_store.put(record_factory("local-1", grade="8", status=ValidationStatus.VALIDATED))
    service = LogbookSync(store=sql_store, client=_client(FLIGHT_ROWS))

    service.run_once()

    assert sql_store.get("local-1").is_pending


def test_malformed_rows_are_skipped(sql_store):
    rows = FLIGHT_ROWS + [{"ALUMNO": "", "SESIÓN": "VBAS-1", "FECHA": "01/09/2024"}]
    service = LogbookSync(store=sql_store, client=_client(rows))

    result = service.run_once()

    assert result.fetched_rows == 3
    assert result.imported == 2
    assert result.rejected_rows == 1
    assert len(sql_store.list()) == 2


def test_fetch_failure_leaves_store_untouched(sql_store, record_factory):
    sql_store.put(record_factory("local-1"))
    client = _client(FLIGHT_ROWS)
    client.fetch_validations.side_effect = SheetsApiError("Se esperaba un array")
    service = LogbookSync(store=sql_store, client=client)

    with pytest.raises(SheetsApiError):
        service.run_once()

    assert [r.id for r in sql_store.list()] == ["local-1"]


def test_dry_run_does_not_write(sql_store):
    service = LogbookSync(store=sql_store, client=_client(FLIGHT_ROWS))

    result = service.run_once(dry_run=True)

    assert result.applied is False
    assert result.imported == 2
    assert sql_store.list() == []


def test_store_rejecting_replacement_raises(record_factory):
    store = MagicMock()
    store.list.return_value = []
    store.replace_all.return_value = False
    service = LogbookSync(store=store, client=_client(FLIGHT_ROWS))

    with pytest.raises(StoreReplaceError):
        service.run_once()


def test_out_of_range_duration_row_is_skipped(sql_store):
    rows = [FLIGHT_ROWS[0], {"ALUMNO": "GAYO", "SESIÓN": "VRAD-3", "FECHA": "02/09/2024", "TIEMPO": "1e18"}]
    service = LogbookSync(store=sql_store, client=_client(rows))

    result = service.run_once()

    assert result.imported == 1
    assert result.rejected_rows == 1
    assert [r.student_name for r in sql_store.list()] == ["TRUJILLO"]


def test_close_releases_client():
    client = _client(FLIGHT_ROWS)
    LogbookSync(store=MagicMock(), client=client).close()
    client.close.assert_called_once_with()
