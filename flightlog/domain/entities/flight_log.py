"""
Entidades de dominio del logbook de vuelo.

FlightLogRecord representa una sesion de entrenamiento registrada por un
instructor. El tiempo se guarda siempre en minutos; la conversion a horas
decimales se hace solo al presentar los datos.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from typing import List, Any, Optional

from flightlog.shared.constants.logbook_constants import FlightType, ValidationStatus


@dataclass(frozen=True)
class Approach:
    """Aproximacion IFR repetible: tipo, numero de veces y lugar."""

    type: str
    count: int
    place: Optional[str] = None


@dataclass
class FlightLogRecord:
    """
    Sesion de vuelo del logbook.

    El `id` lo asigna el almacen local; la hoja central no tiene
    identificador estable, por eso la identidad entre ambos lados se
    resuelve con `composite_key()`.
    """

    id: str
    date: date
    student_name: str
    instructor_name: str
    session: str
    flight_type: FlightType = FlightType.REAL
    grade: str = ""
    total_time: int = 0  # minutos
    approaches: List[Approach] = field(default_factory=list)

    aircraft_registration: str = ""
    departure_place: str = ""
    arrival_place: str = ""
    procedures: str = ""
    remarks: str = ""

    # Validacion
    validation_status: ValidationStatus = ValidationStatus.PENDING
    student_feedback: Optional[str] = None
    validation_remarks: Optional[str] = None

    def __post_init__(self) -> None:
        if self.total_time < 0:
            raise ValueError(f"total_time no puede ser negativo: {self.total_time}")
        if self.validation_status is None:
            self.validation_status = ValidationStatus.PENDING

    def composite_key(self) -> str:
        return build_composite_key(self.date, self.student_name, self.session)

    @property
    def is_validated(self) -> bool:
        return self.validation_status == ValidationStatus.VALIDATED

    @property
    def is_pending(self) -> bool:
        return self.validation_status == ValidationStatus.PENDING

    @property
    def total_hours(self) -> float:
        return self.total_time / 60

    def with_changes(self, **changes: Any) -> "FlightLogRecord":
        """Copia del registro con los campos indicados reemplazados."""
        return replace(self, **changes)


def build_composite_key(flight_date: date, student_name: str, session: str) -> str:
    """
    Clave natural `fecha ISO|alumno|sesion`.

    Es la unica union estable entre el almacen local y la hoja central.
    Dos sesiones distintas con los tres campos iguales colisionan.
    """
    return f"{flight_date.isoformat()}|{(student_name or '').strip()}|{(session or '').strip()}"
