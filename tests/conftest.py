"""
Configuración de fixtures para pytest.
"""
from datetime import date
from typing import Iterator

import pytest
from sqlalchemy.engine import Engine

from flightlog.domain.entities.flight_log import Approach, FlightLogRecord
from flightlog.infrastructure.database.session import (
    Base,
    build_engine,
    build_session_factory,
    init_db,
)
from flightlog.infrastructure.repositories.flight_log_repository import SqlRecordStore
from flightlog.shared.constants.logbook_constants import FlightType, ValidationStatus


# URL de base de datos de prueba
TEST_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture(scope="function")
def db_engine() -> Iterator[Engine]:
    """
    Engine SQLite en memoria con las tablas creadas.
    Se crea una base de datos nueva para cada test.
    """
    engine = build_engine(TEST_DATABASE_URL)
    init_db(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def sql_store(db_engine: Engine) -> SqlRecordStore:
    return SqlRecordStore(build_session_factory(db_engine))


def make_record(
    record_id: str = "rec-1",
    *,
    flight_date: date = date(2024, 9, 1),
    student: str = "TRUJILLO",
    session: str = "VBAS-1",
    instructor: str = "PRIETO",
    flight_type: FlightType = FlightType.REAL,
    minutes: int = 90,
    grade: str = "",
    status: ValidationStatus = ValidationStatus.PENDING,
    **extra,
) -> FlightLogRecord:
    """Construye un FlightLogRecord con valores por defecto razonables."""
    return FlightLogRecord(
        id=record_id,
        date=flight_date,
        student_name=student,
        instructor_name=instructor,
        session=session,
        flight_type=flight_type,
        grade=grade,
        total_time=minutes,
        validation_status=status,
        **extra,
    )


@pytest.fixture
def record_factory():
    return make_record


@pytest.fixture
def sample_approaches():
    return [Approach(type="ILS", count=2, place="LEGR"), Approach(type="VOR", count=1, place="LEBA")]
