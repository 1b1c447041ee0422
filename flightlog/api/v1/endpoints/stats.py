"""
Endpoints de estadisticas: horas, avance del curso y vuelimetro.
Solo cuentan vuelos validados.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from flightlog.application.dto.stats_dto import (
    FlightMeterEntryDTO,
    HourTotalsDTO,
    StudentProgressDTO,
)
from flightlog.application.use_cases.stats_use_cases import StatsUseCases
from flightlog.api.v1.dependencies.use_case_deps import get_stats_use_cases

router = APIRouter(prefix="/stats", tags=["Stats"])


@router.get("/hours", response_model=HourTotalsDTO)
async def hour_totals(
    student: Optional[str] = Query(None, description="Alumno; sin valor suma todos"),
    use_cases: StatsUseCases = Depends(get_stats_use_cases),
):
    return use_cases.hour_totals(student)


@router.get("/progress", response_model=List[StudentProgressDTO])
async def curriculum_progress(
    student: Optional[str] = Query(None, description="Alumno; sin valor devuelve todo el roster"),
    use_cases: StatsUseCases = Depends(get_stats_use_cases),
):
    """
    Sesiones completadas por modulo (VBAS, VRAD, VPRA).
    """
    if student:
        return [use_cases.progress(student)]
    return use_cases.all_progress()


@router.get("/flight-meter", response_model=List[FlightMeterEntryDTO])
async def flight_meter(use_cases: StatsUseCases = Depends(get_stats_use_cases)):
    """
    Horas reales y de simulador de cada alumno frente a los objetivos del curso.
    """
    return use_cases.flight_meter()
