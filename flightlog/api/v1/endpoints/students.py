"""
Endpoints por alumno: validacion masiva y resumen de notas.
"""
from fastapi import APIRouter, Depends

from flightlog.application.dto.flight_log_dto import BulkValidationResultDTO
from flightlog.application.dto.stats_dto import GradeSummaryDTO
from flightlog.application.use_cases.stats_use_cases import StatsUseCases
from flightlog.application.use_cases.validation_use_cases import ValidationUseCases
from flightlog.api.v1.dependencies.use_case_deps import (
    get_stats_use_cases,
    get_validation_use_cases,
)

router = APIRouter(prefix="/students", tags=["Students"])


@router.post("/{student_name}/validate-all", response_model=BulkValidationResultDTO)
async def validate_all_pending(
    student_name: str,
    use_cases: ValidationUseCases = Depends(get_validation_use_cases),
):
    """
    Validar como APTO todos los vuelos pendientes del alumno.
    """
    records = await use_cases.validate_all_pending(student_name)
    return BulkValidationResultDTO(
        student_name=student_name,
        validated=len(records),
        flight_ids=[r.id for r in records],
    )


@router.get("/{student_name}/grades", response_model=GradeSummaryDTO)
async def grade_summary(
    student_name: str,
    use_cases: StatsUseCases = Depends(get_stats_use_cases),
):
    return use_cases.grade_summary(student_name)
