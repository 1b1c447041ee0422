"""
Tests del ciclo de validacion: cambio local sincrono + envio en segundo plano.
"""
from unittest.mock import AsyncMock

import pytest

from flightlog.application.use_cases.validation_use_cases import ValidationUseCases
from flightlog.infrastructure.external.sheets_sync.sheets_publisher import SheetsPublisher
from flightlog.infrastructure.repositories.flight_log_repository import InMemoryRecordStore
from flightlog.shared.constants.logbook_constants import ValidationStatus
from flightlog.shared.exceptions.domain import (
    EntityNotFoundException,
    InvalidTransitionException,
    ValidationException,
)
from flightlog.shared.utils.background import drain_pending

KEY = "2024-09-01|TRUJILLO|VBAS-1"


@pytest.fixture
def publisher() -> AsyncMock:
    mock = AsyncMock(spec=SheetsPublisher)
    mock.send_validation.return_value = True
    return mock


@pytest.fixture
def store(record_factory) -> InMemoryRecordStore:
    return InMemoryRecordStore([record_factory("r1")])


@pytest.fixture
def use_cases(store, publisher) -> ValidationUseCases:
    return ValidationUseCases(store, publisher)


@pytest.mark.asyncio
async def test_validate_updates_store_and_pushes(use_cases, store, publisher):
    result = await use_cases.validate("r1", "8", "Buen control")

    assert result.validation_status == ValidationStatus.VALIDATED
    assert store.get("r1").grade == "8"
    assert store.get("r1").validation_remarks == "Buen control"

    await drain_pending()
    publisher.send_validation.assert_awaited_once_with(
        KEY,
        ValidationStatus.VALIDATED,
        feedback=None,
        grade="8",
        remarks="Buen control",
    )


@pytest.mark.asyncio
@pytest.mark.parametrize("grade", ["APTO", "7.5", "NO EVALUABLE"])
async def test_grade_round_trip(use_cases, store, grade):
    await use_cases.validate("r1", grade)
    await drain_pending()
    assert store.get("r1").grade == grade


@pytest.mark.asyncio
async def test_validate_requires_grade(use_cases, store, publisher):
    with pytest.raises(ValidationException):
        await use_cases.validate("r1", "  ")

    assert store.get("r1").is_pending
    publisher.send_validation.assert_not_called()


@pytest.mark.asyncio
async def test_reject_uses_default_feedback(use_cases, store, publisher):
    result = await use_cases.reject("r1")

    assert result.validation_status == ValidationStatus.REJECTED
    assert result.student_feedback == "Sin especificar"

    await drain_pending()
    publisher.send_validation.assert_awaited_once_with(
        KEY,
        ValidationStatus.REJECTED,
        feedback="Sin especificar",
        grade=None,
        remarks=None,
    )


@pytest.mark.asyncio
async def test_rejected_flight_can_be_validated(use_cases, store):
    await use_cases.reject("r1", "Repetir aproximacion")
    result = await use_cases.validate("r1", "6")

    assert result.is_validated
    assert result.student_feedback == "Repetir aproximacion"


@pytest.mark.asyncio
async def test_validated_flight_cannot_be_rejected(use_cases, store):
    await use_cases.validate("r1", "8")

    with pytest.raises(InvalidTransitionException):
        await use_cases.reject("r1", "Tarde")

    assert store.get("r1").is_validated


@pytest.mark.asyncio
async def test_revalidation_corrects_grade(use_cases, store):
    await use_cases.validate("r1", "5")
    await use_cases.validate("r1", "9")
    assert store.get("r1").grade == "9"


@pytest.mark.asyncio
async def test_unknown_flight(use_cases):
    with pytest.raises(EntityNotFoundException):
        await use_cases.validate("nope", "8")


@pytest.mark.asyncio
async def test_push_failure_is_not_rolled_back(use_cases, store, publisher):
    publisher.send_validation.side_effect = RuntimeError("red caida")

    await use_cases.validate("r1", "8")
    await drain_pending()

    assert store.get("r1").is_validated


@pytest.mark.asyncio
async def test_works_without_publisher(store):
    use_cases = ValidationUseCases(store)
    result = await use_cases.validate("r1", "APTO")
    assert result.is_validated


def test_list_pending_filters_by_instructor(record_factory):
    from datetime import date

    store = InMemoryRecordStore([
        record_factory("a", instructor="DUEÑAS", flight_date=date(2024, 9, 1)),
        record_factory("b", instructor="Dueñas", flight_date=date(2024, 9, 3), session="VBAS-2"),
        record_factory("c", instructor="PRIETO", session="VBAS-3"),
        record_factory("d", instructor="DUENAS", session="VBAS-4", status=ValidationStatus.VALIDATED),
    ])
    use_cases = ValidationUseCases(store)

    assert [r.id for r in use_cases.list_pending("duenas")] == ["b", "a"]
    assert len(use_cases.list_pending()) == 3


@pytest.mark.asyncio
async def test_validate_all_pending(record_factory, publisher):
    store = InMemoryRecordStore([
        record_factory("a"),
        record_factory("b", session="VBAS-2"),
        record_factory("c", session="VBAS-3", status=ValidationStatus.REJECTED),
        record_factory("d", student="GAYO", session="VBAS-4"),
    ])
    use_cases = ValidationUseCases(store, publisher)

    validated = await use_cases.validate_all_pending("trujillo")
    await drain_pending()

    assert sorted(r.id for r in validated) == ["a", "b"]
    assert store.get("a").grade == "APTO"
    assert store.get("a").validation_remarks == "Validación masiva"
    assert store.get("c").validation_status == ValidationStatus.REJECTED
    assert store.get("d").is_pending
    assert publisher.send_validation.await_count == 2
