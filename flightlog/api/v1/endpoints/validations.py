from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from flightlog.application.dto.flight_log_dto import FlightLogDTO
from flightlog.application.use_cases.validation_use_cases import ValidationUseCases
from flightlog.api.v1.dependencies.use_case_deps import get_validation_use_cases

router = APIRouter(prefix="/validations", tags=["Validations"])


@router.get("/pending", response_model=List[FlightLogDTO])
async def list_pending(
    instructor: Optional[str] = Query(None, description="Solo los vuelos de este instructor"),
    use_cases: ValidationUseCases = Depends(get_validation_use_cases),
):
    """
    Vuelos pendientes de validar, mas recientes primero.
    """
    return [FlightLogDTO.from_record(r) for r in use_cases.list_pending(instructor)]
