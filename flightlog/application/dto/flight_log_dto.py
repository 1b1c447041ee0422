"""
DTOs relacionados con vuelos del logbook.
Los tiempos viajan en horas decimales; internamente se guardan en minutos.
"""
from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from flightlog.domain.entities.flight_log import FlightLogRecord
from flightlog.shared.constants.logbook_constants import (
    MAX_SESSION_HOURS,
    FlightType,
    ValidationStatus,
)


class ApproachDTO(BaseModel):
    """Aproximacion IFR: tipo, repeticiones y lugar."""
    type: str = Field(..., min_length=1, description="Tipo de aproximacion (ILS, VOR, ...)")
    count: int = Field(1, ge=1, description="Numero de repeticiones")
    place: Optional[str] = Field(None, description="Aerodromo (p.ej. LEGR)")


class FlightLogCreateDTO(BaseModel):
    """
    DTO para registrar un vuelo nuevo.
    """
    date: date
    student_name: str = Field(..., min_length=1)
    instructor_name: str = Field(..., min_length=1)
    session: str = Field(..., pattern=r"^[A-Za-z]+-\d+$", description="Codigo TIPO-NUMERO, p.ej. VBAS-3")
    flight_type: FlightType = FlightType.REAL
    grade: str = ""
    total_hours: float = Field(
        0, ge=0, le=MAX_SESSION_HOURS, allow_inf_nan=False,
        description="Duracion en horas decimales",
    )
    approaches: List[ApproachDTO] = Field(default_factory=list)

    aircraft_registration: str = ""
    departure_place: str = ""
    arrival_place: str = ""
    procedures: str = ""
    remarks: str = ""

    @field_validator("student_name", "instructor_name", "session")
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("no puede estar vacio")
        return v


class FlightLogDTO(BaseModel):
    """
    DTO de salida de un vuelo.
    """
    id: str
    date: date
    student_name: str
    instructor_name: str
    session: str
    flight_type: FlightType
    grade: str
    total_time: int = Field(..., description="Duracion en minutos")
    total_hours: float
    approaches: List[ApproachDTO] = Field(default_factory=list)

    aircraft_registration: str = ""
    departure_place: str = ""
    arrival_place: str = ""
    procedures: str = ""
    remarks: str = ""

    validation_status: ValidationStatus
    student_feedback: Optional[str] = None
    validation_remarks: Optional[str] = None

    @classmethod
    def from_record(cls, record: FlightLogRecord) -> "FlightLogDTO":
        return cls(
            id=record.id,
            date=record.date,
            student_name=record.student_name,
            instructor_name=record.instructor_name,
            session=record.session,
            flight_type=record.flight_type,
            grade=record.grade,
            total_time=record.total_time,
            total_hours=round(record.total_hours, 2),
            approaches=[
                ApproachDTO(type=a.type, count=a.count, place=a.place)
                for a in record.approaches
            ],
            aircraft_registration=record.aircraft_registration,
            departure_place=record.departure_place,
            arrival_place=record.arrival_place,
            procedures=record.procedures,
            remarks=record.remarks,
            validation_status=record.validation_status,
            student_feedback=record.student_feedback,
            validation_remarks=record.validation_remarks,
        )


class ValidateFlightDTO(BaseModel):
    """Datos para validar un vuelo."""
    grade: str = Field(..., description="Nota 0-10 o APTO / NO APTO / NO EVALUABLE")
    remarks: Optional[str] = None


class RejectFlightDTO(BaseModel):
    """Datos para rechazar un vuelo."""
    feedback: Optional[str] = Field(None, description="Motivo del rechazo")


class BulkValidationResultDTO(BaseModel):
    """Resultado de la validacion masiva de un alumno."""
    student_name: str
    validated: int
    flight_ids: List[str] = Field(default_factory=list)
