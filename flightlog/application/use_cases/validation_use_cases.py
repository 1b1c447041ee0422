"""
Casos de uso del ciclo de validacion de vuelos.

Cada transicion se aplica primero en el almacen local (de forma sincrona)
y despues se envia a la hoja central en segundo plano. El envio no tiene
reintentos ni acuse: si falla se registra y el cambio local se mantiene.
El siguiente sync deja el estado que tenga la hoja.
"""
from typing import List, Optional

from loguru import logger

from flightlog.application.services.validation_policy import (
    ensure_transition,
    normalize_grade,
    rejection_feedback,
)
from flightlog.domain.entities.flight_log import FlightLogRecord
from flightlog.domain.repositories.record_store import IRecordStore
from flightlog.infrastructure.external.sheets_sync.sheets_publisher import SheetsPublisher
from flightlog.shared.constants.logbook_constants import (
    BULK_VALIDATION_GRADE,
    BULK_VALIDATION_REMARKS,
    ValidationStatus,
)
from flightlog.shared.exceptions.domain import EntityNotFoundException, PersistenceException
from flightlog.shared.utils.background import fire_and_forget
from flightlog.shared.utils.text_utils import same_person


class ValidationUseCases:
    """
    Casos de uso para validar y rechazar vuelos.
    """

    def __init__(self, store: IRecordStore, publisher: Optional[SheetsPublisher] = None):
        self.store = store
        self.publisher = publisher

    def _get_or_raise(self, flight_id: str) -> FlightLogRecord:
        record = self.store.get(flight_id)
        if not record:
            raise EntityNotFoundException("FlightLog", flight_id)
        return record

    def _save(self, record: FlightLogRecord) -> None:
        if not self.store.put(record):
            raise PersistenceException("No se pudo guardar el vuelo en el almacen local", record.id)

    def _push(self, record: FlightLogRecord) -> None:
        if self.publisher is None:
            return
        key = record.composite_key()
        fire_and_forget(
            self.publisher.send_validation(
                key,
                record.validation_status,
                feedback=record.student_feedback if record.validation_status == ValidationStatus.REJECTED else None,
                grade=record.grade if record.validation_status == ValidationStatus.VALIDATED else None,
                remarks=record.validation_remarks,
            ),
            label=f"validacion {key}",
        )

    async def validate(
        self,
        flight_id: str,
        grade: str,
        remarks: Optional[str] = None,
    ) -> FlightLogRecord:
        """
        Valida un vuelo con su nota.

        Raises:
            EntityNotFoundException: si el vuelo no existe
            InvalidTransitionException: si el vuelo no admite validacion
            ValidationException: nota vacia o no reconocida
        """
        record = self._get_or_raise(flight_id)
        ensure_transition(record.validation_status, ValidationStatus.VALIDATED)
        clean_grade = normalize_grade(grade)

        updated = record.with_changes(
            validation_status=ValidationStatus.VALIDATED,
            grade=clean_grade,
            validation_remarks=(remarks or "").strip() or None,
        )
        self._save(updated)
        logger.info(f"Vuelo {flight_id} validado con nota {clean_grade}")
        self._push(updated)
        return updated

    async def reject(self, flight_id: str, feedback: Optional[str] = None) -> FlightLogRecord:
        """
        Rechaza un vuelo pendiente con un motivo para el alumno.

        Raises:
            EntityNotFoundException: si el vuelo no existe
            InvalidTransitionException: si el vuelo ya estaba validado
        """
        record = self._get_or_raise(flight_id)
        ensure_transition(record.validation_status, ValidationStatus.REJECTED)

        updated = record.with_changes(
            validation_status=ValidationStatus.REJECTED,
            student_feedback=rejection_feedback(feedback),
        )
        self._save(updated)
        logger.info(f"Vuelo {flight_id} rechazado: {updated.student_feedback}")
        self._push(updated)
        return updated

    def list_pending(self, instructor_name: Optional[str] = None) -> List[FlightLogRecord]:
        """
        Vuelos pendientes, mas recientes primero. Con `instructor_name` solo
        los de ese instructor (sin distinguir tildes ni mayusculas).
        """
        pending = self.store.aggregate(
            lambda r: r.is_pending and (
                instructor_name is None or same_person(r.instructor_name, instructor_name)
            )
        )
        return sorted(pending, key=lambda r: r.date, reverse=True)

    async def validate_all_pending(self, student_name: str) -> List[FlightLogRecord]:
        """
        Valida como APTO todos los vuelos pendientes de un alumno.
        """
        pending = self.store.aggregate(
            lambda r: r.is_pending and same_person(r.student_name, student_name)
        )
        validated = [
            await self.validate(r.id, BULK_VALIDATION_GRADE, BULK_VALIDATION_REMARKS)
            for r in pending
        ]
        logger.info(f"Validacion masiva de {student_name}: {len(validated)} vuelo(s)")
        return validated
