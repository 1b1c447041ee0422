"""
Entidades de dominio para estadisticas del logbook.

Todas las sumas se llevan en minutos (enteros) para no acumular error de
coma flotante; las propiedades *_hours convierten solo para presentar.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


def minutes_to_hours(minutes: int) -> float:
    return minutes / 60


@dataclass
class HourTotals:
    """Totales de tiempo de vuelo validado."""

    total_minutes: int = 0
    real_minutes: int = 0
    simulator_minutes: int = 0
    trainer_minutes: int = 0

    @property
    def sim_trainer_minutes(self) -> int:
        return self.simulator_minutes + self.trainer_minutes

    @property
    def total_hours(self) -> float:
        return minutes_to_hours(self.total_minutes)

    @property
    def real_hours(self) -> float:
        return minutes_to_hours(self.real_minutes)

    @property
    def simulator_hours(self) -> float:
        return minutes_to_hours(self.simulator_minutes)

    @property
    def trainer_hours(self) -> float:
        return minutes_to_hours(self.trainer_minutes)

    @property
    def sim_trainer_hours(self) -> float:
        return minutes_to_hours(self.sim_trainer_minutes)


@dataclass
class ModuleProgress:
    """Avance de un alumno en un modulo del curso (VBAS, VRAD, VPRA)."""

    code: str
    label: str
    required: int
    completed_sessions: List[int] = field(default_factory=list)

    @property
    def completed(self) -> int:
        return len(self.completed_sessions)

    @property
    def percentage(self) -> int:
        if self.required <= 0:
            return 0
        return min(100, round(self.completed / self.required * 100))


@dataclass
class StudentProgress:
    student_name: str
    modules: List[ModuleProgress] = field(default_factory=list)


@dataclass
class FlightMeterEntry:
    """Fila del vuelimetro: horas reales y de simulador frente a los objetivos."""

    student_name: str
    real_minutes: int = 0
    sim_minutes: int = 0
    goal_real_hours: float = 0.0
    goal_sim_hours: float = 0.0
    goal_total_hours: float = 0.0

    @property
    def total_minutes(self) -> int:
        return self.real_minutes + self.sim_minutes

    @property
    def real_hours(self) -> float:
        return minutes_to_hours(self.real_minutes)

    @property
    def sim_hours(self) -> float:
        return minutes_to_hours(self.sim_minutes)

    @property
    def total_hours(self) -> float:
        return minutes_to_hours(self.total_minutes)


@dataclass
class GradeSummary:
    """Resumen de calificaciones de un alumno."""

    student_name: str
    flights: int = 0
    passed: int = 0
    failed: int = 0
    not_evaluable: int = 0
    average_grade: Optional[float] = None
