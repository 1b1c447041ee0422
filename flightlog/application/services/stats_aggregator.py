"""
Agregador de estadisticas y progreso del logbook.

Calcula totales de horas, avance por modulo del curso, vuelimetro y
resumen de notas. Solo cuentan los vuelos VALIDADOS: un vuelo pendiente o
rechazado nunca suma.
"""
from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional, Sequence

from flightlog.domain.entities.flight_log import FlightLogRecord
from flightlog.domain.entities.logbook_stats import (
    FlightMeterEntry,
    GradeSummary,
    HourTotals,
    ModuleProgress,
    StudentProgress,
)
from flightlog.shared.constants.logbook_constants import (
    CURRICULUM_LABELS,
    CURRICULUM_MODULES,
    GOAL_REAL_HOURS,
    GOAL_SIM_HOURS,
    GOAL_TOTAL_HOURS,
    STUDENTS,
    FlightType,
)
from flightlog.shared.utils.text_utils import same_person

from .validation_policy import is_passing_grade, parse_numeric_grade


class StatsAggregator:
    """
    Agregador de estadisticas sobre vuelos del almacen local.

    Uso:
        aggregator = StatsAggregator()
        totals = aggregator.hour_totals(store.list(), student_name="TRUJILLO")
    """

    # Cuenta el numero inicial tras el guion; admite espacios y sufijos ("VBAS-1A")
    SESSION_RE = re.compile(r"^([A-Z]+)-\s*(\d+)")

    def __init__(
        self,
        modules: Optional[Dict[str, int]] = None,
        roster: Optional[Sequence[str]] = None,
    ):
        self.modules = dict(modules or CURRICULUM_MODULES)
        self.roster = list(roster or STUDENTS)

    @staticmethod
    def validated(
        records: Iterable[FlightLogRecord],
        student_name: Optional[str] = None,
    ) -> List[FlightLogRecord]:
        """Vuelos validados, opcionalmente de un solo alumno."""
        return [
            r for r in records
            if r.is_validated and (student_name is None or same_person(r.student_name, student_name))
        ]

    def hour_totals(
        self,
        records: Iterable[FlightLogRecord],
        student_name: Optional[str] = None,
    ) -> HourTotals:
        totals = HourTotals()
        for r in self.validated(records, student_name):
            totals.total_minutes += r.total_time
            if r.flight_type == FlightType.SIMULATOR:
                totals.simulator_minutes += r.total_time
            elif r.flight_type == FlightType.TRAINER:
                totals.trainer_minutes += r.total_time
            else:
                totals.real_minutes += r.total_time
        return totals

    def parse_session(self, session: str) -> Optional[tuple]:
        """
        "VBAS-3" -> ("VBAS", 3). None si no es una sesion del curso o si el
        numero queda fuera de 1..requeridas.
        """
        match = self.SESSION_RE.match((session or "").strip().upper())
        if not match:
            return None
        code, number = match.group(1), int(match.group(2))
        required = self.modules.get(code)
        if required is None or not 1 <= number <= required:
            return None
        return code, number

    def student_progress(
        self,
        records: Iterable[FlightLogRecord],
        student_name: str,
    ) -> StudentProgress:
        """Sesiones distintas completadas por modulo."""
        completed: Dict[str, set] = {code: set() for code in self.modules}
        for r in self.validated(records, student_name):
            parsed = self.parse_session(r.session)
            if parsed:
                completed[parsed[0]].add(parsed[1])

        return StudentProgress(
            student_name=student_name,
            modules=[
                ModuleProgress(
                    code=code,
                    label=CURRICULUM_LABELS.get(code, code),
                    required=required,
                    completed_sessions=sorted(completed[code]),
                )
                for code, required in self.modules.items()
            ],
        )

    def flight_meter(self, records: Iterable[FlightLogRecord]) -> List[FlightMeterEntry]:
        """
        Horas reales y de simulador (+ entrenador) por alumno del roster,
        en el orden de presentacion del roster.
        """
        records = list(records)
        entries: List[FlightMeterEntry] = []
        for student in self.roster:
            totals = self.hour_totals(records, student)
            entries.append(FlightMeterEntry(
                student_name=student,
                real_minutes=totals.real_minutes,
                sim_minutes=totals.sim_trainer_minutes,
                goal_real_hours=GOAL_REAL_HOURS,
                goal_sim_hours=GOAL_SIM_HOURS,
                goal_total_hours=GOAL_TOTAL_HOURS,
            ))
        return entries

    def grade_summary(
        self,
        records: Iterable[FlightLogRecord],
        student_name: str,
    ) -> GradeSummary:
        summary = GradeSummary(student_name=student_name)
        numeric: List[float] = []
        for r in self.validated(records, student_name):
            summary.flights += 1
            value = parse_numeric_grade(r.grade)
            if value is not None:
                numeric.append(value)

            passing = is_passing_grade(r.grade)
            if passing is None:
                if r.grade.strip():
                    summary.not_evaluable += 1
            elif passing:
                summary.passed += 1
            else:
                summary.failed += 1

        if numeric:
            summary.average_grade = round(sum(numeric) / len(numeric), 2)
        return summary
