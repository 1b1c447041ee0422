"""
Endpoints de vuelos del logbook.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from flightlog.application.dto.flight_log_dto import (
    FlightLogCreateDTO,
    FlightLogDTO,
    RejectFlightDTO,
    ValidateFlightDTO,
)
from flightlog.application.use_cases.flight_log_use_cases import FlightLogUseCases
from flightlog.application.use_cases.validation_use_cases import ValidationUseCases
from flightlog.api.v1.dependencies.use_case_deps import (
    get_flight_log_use_cases,
    get_validation_use_cases,
)
from flightlog.shared.constants.logbook_constants import ValidationStatus

router = APIRouter(prefix="/flights", tags=["Flights"])


@router.get("", response_model=List[FlightLogDTO])
async def list_flights(
    student: Optional[str] = Query(None, description="Filtrar por alumno"),
    instructor: Optional[str] = Query(None, description="Filtrar por instructor"),
    validation_status: Optional[ValidationStatus] = Query(None, alias="status"),
    use_cases: FlightLogUseCases = Depends(get_flight_log_use_cases),
):
    """
    Listar vuelos del almacen local, mas recientes primero.
    """
    records = use_cases.list_flights(
        student_name=student,
        instructor_name=instructor,
        status=validation_status,
    )
    return [FlightLogDTO.from_record(r) for r in records]


@router.post("", response_model=FlightLogDTO, status_code=status.HTTP_201_CREATED)
async def create_flight(
    dto: FlightLogCreateDTO,
    use_cases: FlightLogUseCases = Depends(get_flight_log_use_cases),
):
    """
    Registrar un vuelo. Queda pendiente de validar y se envia a la hoja central.
    """
    record = await use_cases.create_flight(dto)
    return FlightLogDTO.from_record(record)


@router.get("/{flight_id}", response_model=FlightLogDTO)
async def get_flight(
    flight_id: str,
    use_cases: FlightLogUseCases = Depends(get_flight_log_use_cases),
):
    return FlightLogDTO.from_record(use_cases.get_flight(flight_id))


@router.delete("/{flight_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_flight(
    flight_id: str,
    use_cases: FlightLogUseCases = Depends(get_flight_log_use_cases),
):
    """
    Eliminar la copia local de un vuelo.
    """
    use_cases.delete_flight(flight_id)


@router.post("/{flight_id}/validate", response_model=FlightLogDTO)
async def validate_flight(
    flight_id: str,
    dto: ValidateFlightDTO,
    use_cases: ValidationUseCases = Depends(get_validation_use_cases),
):
    """
    Validar un vuelo pendiente o rechazado (o corregir la nota de uno validado).
    """
    record = await use_cases.validate(flight_id, dto.grade, dto.remarks)
    return FlightLogDTO.from_record(record)


@router.post("/{flight_id}/reject", response_model=FlightLogDTO)
async def reject_flight(
    flight_id: str,
    dto: RejectFlightDTO,
    use_cases: ValidationUseCases = Depends(get_validation_use_cases),
):
    """
    Rechazar un vuelo pendiente. Sin motivo se guarda "Sin especificar".
    """
    record = await use_cases.reject(flight_id, dto.feedback)
    return FlightLogDTO.from_record(record)
