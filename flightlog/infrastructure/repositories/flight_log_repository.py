"""
Implementaciones del almacen local de vuelos.

- SqlRecordStore: persistencia en base de datos (SQLite por defecto).
- InMemoryRecordStore: mismo contrato sin persistencia, util cuando no hay
  disco disponible o para pruebas de los casos de uso.
"""
from typing import Callable, Dict, Iterable, List, Optional

from loguru import logger
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from flightlog.domain.entities.flight_log import Approach, FlightLogRecord
from flightlog.domain.repositories.record_store import IRecordStore
from flightlog.infrastructure.database.models import FlightLogModel
from flightlog.shared.constants.logbook_constants import FlightType, ValidationStatus


def _record_to_row(record: FlightLogRecord) -> FlightLogModel:
    return FlightLogModel(
        id=record.id,
        date=record.date,
        student_name=record.student_name,
        instructor_name=record.instructor_name,
        session=record.session,
        flight_type=record.flight_type.value,
        grade=record.grade,
        total_time=record.total_time,
        approaches=[
            {"type": a.type, "count": a.count, "place": a.place}
            for a in record.approaches
        ],
        aircraft_registration=record.aircraft_registration,
        departure_place=record.departure_place,
        arrival_place=record.arrival_place,
        procedures=record.procedures,
        remarks=record.remarks,
        validation_status=record.validation_status.value,
        student_feedback=record.student_feedback,
        validation_remarks=record.validation_remarks,
    )


def _row_to_record(row: FlightLogModel) -> FlightLogRecord:
    return FlightLogRecord(
        id=row.id,
        date=row.date,
        student_name=row.student_name,
        instructor_name=row.instructor_name or "",
        session=row.session,
        flight_type=FlightType(row.flight_type or FlightType.REAL.value),
        grade=row.grade or "",
        total_time=row.total_time or 0,
        approaches=[Approach(**a) for a in (row.approaches or [])],
        aircraft_registration=row.aircraft_registration or "",
        departure_place=row.departure_place or "",
        arrival_place=row.arrival_place or "",
        procedures=row.procedures or "",
        remarks=row.remarks or "",
        validation_status=ValidationStatus(row.validation_status or ValidationStatus.PENDING.value),
        student_feedback=row.student_feedback,
        validation_remarks=row.validation_remarks,
    )


class SqlRecordStore(IRecordStore):
    """
    Almacen de vuelos sobre SQLAlchemy.

    Cada operacion abre y cierra su propia sesion. Los errores de base de
    datos (incluidos valores que el motor no puede representar) se
    registran y se degradan a resultados vacios / False.
    """

    def __init__(self, session_factory: Callable[[], Session]):
        """
        Args:
            session_factory: sessionmaker ligado al engine del almacen
        """
        self._session_factory = session_factory

    def list(self) -> List[FlightLogRecord]:
        try:
            with self._session_factory() as db:
                rows = db.execute(
                    select(FlightLogModel).order_by(FlightLogModel.date.desc(), FlightLogModel.id)
                ).scalars().all()
                return [_row_to_record(r) for r in rows]
        except (SQLAlchemyError, ValueError) as e:
            logger.error(f"Error leyendo vuelos locales: {e}")
            return []

    def get(self, record_id: str) -> Optional[FlightLogRecord]:
        try:
            with self._session_factory() as db:
                row = db.get(FlightLogModel, record_id)
                return _row_to_record(row) if row else None
        except (SQLAlchemyError, ValueError) as e:
            logger.error(f"Error leyendo vuelo {record_id}: {e}")
            return None

    def put(self, record: FlightLogRecord) -> bool:
        try:
            with self._session_factory() as db:
                # merge: inserta si el id no existe, si no reemplaza la fila
                db.merge(_record_to_row(record))
                db.commit()
            return True
        except (SQLAlchemyError, OverflowError, ValueError) as e:
            logger.error(f"Error guardando vuelo {record.id}: {e}")
            return False

    def delete(self, record_id: str) -> bool:
        try:
            with self._session_factory() as db:
                result = db.execute(delete(FlightLogModel).where(FlightLogModel.id == record_id))
                db.commit()
                return bool(result.rowcount)
        except SQLAlchemyError as e:
            logger.error(f"Error eliminando vuelo {record_id}: {e}")
            return False

    def clear(self) -> None:
        try:
            with self._session_factory() as db:
                db.execute(delete(FlightLogModel))
                db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Error vaciando el almacen local: {e}")

    def replace_all(self, records: Iterable[FlightLogRecord]) -> bool:
        rows = [_record_to_row(r) for r in records]
        try:
            with self._session_factory() as db:
                with db.begin():
                    db.execute(delete(FlightLogModel))
                    db.add_all(rows)
            logger.debug(f"Almacen local reemplazado: {len(rows)} vuelo(s)")
            return True
        except (SQLAlchemyError, OverflowError, ValueError) as e:
            logger.error(f"Reemplazo completo abortado, se conserva el conjunto anterior: {e}")
            return False


class InMemoryRecordStore(IRecordStore):
    """Almacen en memoria con el mismo contrato que SqlRecordStore."""

    def __init__(self, records: Optional[Iterable[FlightLogRecord]] = None):
        self._records: Dict[str, FlightLogRecord] = {}
        for r in records or []:
            self._records[r.id] = r

    def list(self) -> List[FlightLogRecord]:
        return sorted(self._records.values(), key=lambda r: (-r.date.toordinal(), r.id))

    def get(self, record_id: str) -> Optional[FlightLogRecord]:
        return self._records.get(record_id)

    def put(self, record: FlightLogRecord) -> bool:
        self._records[record.id] = record
        return True

    def delete(self, record_id: str) -> bool:
        return self._records.pop(record_id, None) is not None

    def clear(self) -> None:
        self._records.clear()

    def replace_all(self, records: Iterable[FlightLogRecord]) -> bool:
        replacement: Dict[str, FlightLogRecord] = {}
        for r in records:
            if r.id in replacement:
                logger.error(f"Reemplazo completo abortado: id duplicado {r.id}")
                return False
            replacement[r.id] = r
        self._records = replacement
        return True
