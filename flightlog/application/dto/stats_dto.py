"""
DTOs para estadisticas y progreso del curso.
"""
from typing import List, Optional

from pydantic import BaseModel, Field


class HourTotalsDTO(BaseModel):
    """Horas validadas (decimales) por tipo de vuelo."""
    student_name: Optional[str] = None
    total_hours: float
    real_hours: float
    simulator_hours: float
    trainer_hours: float
    sim_trainer_hours: float


class ModuleProgressDTO(BaseModel):
    code: str
    label: str
    required: int
    completed: int
    percentage: int = Field(..., ge=0, le=100)
    completed_sessions: List[int] = Field(default_factory=list)


class StudentProgressDTO(BaseModel):
    student_name: str
    modules: List[ModuleProgressDTO]


class FlightMeterEntryDTO(BaseModel):
    """Fila del vuelimetro."""
    student_name: str
    real_hours: float
    sim_hours: float
    total_hours: float
    goal_real_hours: float
    goal_sim_hours: float
    goal_total_hours: float


class GradeSummaryDTO(BaseModel):
    student_name: str
    flights: int
    passed: int
    failed: int
    not_evaluable: int
    average_grade: Optional[float] = None
