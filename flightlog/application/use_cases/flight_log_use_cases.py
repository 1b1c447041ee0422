"""
Casos de uso para el registro y consulta de vuelos.
"""
import uuid
from typing import List, Optional

from loguru import logger

from flightlog.application.dto.flight_log_dto import FlightLogCreateDTO
from flightlog.domain.entities.flight_log import Approach, FlightLogRecord
from flightlog.domain.repositories.record_store import IRecordStore
from flightlog.infrastructure.external.sheets_sync.row_mapper import (
    effective_flight_type,
    parse_duration_minutes,
)
from flightlog.infrastructure.external.sheets_sync.sheets_publisher import SheetsPublisher
from flightlog.shared.constants.logbook_constants import ValidationStatus
from flightlog.shared.exceptions.domain import EntityNotFoundException, PersistenceException
from flightlog.shared.utils.background import fire_and_forget
from flightlog.shared.utils.text_utils import same_person


class FlightLogUseCases:
    """
    Casos de uso para gestion de vuelos del logbook.
    """

    def __init__(self, store: IRecordStore, publisher: Optional[SheetsPublisher] = None):
        self.store = store
        self.publisher = publisher

    async def create_flight(self, dto: FlightLogCreateDTO) -> FlightLogRecord:
        """
        Registra un vuelo nuevo.

        Se guarda primero la copia local (queda pendiente de validar) y
        despues se envia a la hoja central en segundo plano.

        Raises:
            PersistenceException: si el almacen local rechaza el vuelo
        """
        record = FlightLogRecord(
            id=str(uuid.uuid4()),
            date=dto.date,
            student_name=dto.student_name,
            instructor_name=dto.instructor_name,
            session=dto.session.upper(),
            flight_type=effective_flight_type(dto.flight_type, dto.aircraft_registration),
            grade=dto.grade.strip(),
            total_time=parse_duration_minutes(dto.total_hours),
            approaches=[Approach(type=a.type.upper(), count=a.count, place=a.place) for a in dto.approaches],
            aircraft_registration=dto.aircraft_registration.strip(),
            departure_place=dto.departure_place.strip(),
            arrival_place=dto.arrival_place.strip(),
            procedures=dto.procedures.strip(),
            remarks=dto.remarks.strip(),
            validation_status=ValidationStatus.PENDING,
        )
        if not self.store.put(record):
            raise PersistenceException("No se pudo guardar el vuelo en el almacen local", record.id)

        logger.info(f"Vuelo registrado: {record.composite_key()} ({record.id})")
        if self.publisher is not None:
            fire_and_forget(
                self.publisher.send_new_flight(record),
                label=f"vuelo {record.composite_key()}",
            )
        return record

    def list_flights(
        self,
        student_name: Optional[str] = None,
        instructor_name: Optional[str] = None,
        status: Optional[ValidationStatus] = None,
    ) -> List[FlightLogRecord]:
        """
        Lista vuelos, mas recientes primero, con filtros opcionales.
        """
        return self.store.aggregate(
            lambda r: (student_name is None or same_person(r.student_name, student_name))
            and (instructor_name is None or same_person(r.instructor_name, instructor_name))
            and (status is None or r.validation_status == status)
        )

    def get_flight(self, flight_id: str) -> FlightLogRecord:
        """
        Raises:
            EntityNotFoundException: Si el vuelo no existe
        """
        record = self.store.get(flight_id)
        if not record:
            raise EntityNotFoundException("FlightLog", flight_id)
        return record

    def delete_flight(self, flight_id: str) -> None:
        """
        Elimina la copia local de un vuelo. La hoja central no se modifica,
        asi que el vuelo vuelve a aparecer en el siguiente sync si sigue alli.

        Raises:
            EntityNotFoundException: Si el vuelo no existe
        """
        if not self.store.delete(flight_id):
            raise EntityNotFoundException("FlightLog", flight_id)
        logger.info(f"Vuelo {flight_id} eliminado del almacen local")
