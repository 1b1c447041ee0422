"""
Casos de uso de estadisticas y progreso.
"""
from typing import List, Optional

from flightlog.application.dto.stats_dto import (
    FlightMeterEntryDTO,
    GradeSummaryDTO,
    HourTotalsDTO,
    ModuleProgressDTO,
    StudentProgressDTO,
)
from flightlog.application.services.stats_aggregator import StatsAggregator
from flightlog.domain.repositories.record_store import IRecordStore
from flightlog.shared.constants.logbook_constants import STUDENTS
from flightlog.shared.utils.text_utils import match_roster_name


class StatsUseCases:
    """
    Casos de uso para consultar horas, avance del curso y notas.
    """

    def __init__(self, store: IRecordStore, aggregator: Optional[StatsAggregator] = None):
        self.store = store
        self.aggregator = aggregator or StatsAggregator()

    def hour_totals(self, student_name: Optional[str] = None) -> HourTotalsDTO:
        totals = self.aggregator.hour_totals(self.store.list(), student_name)
        return HourTotalsDTO(
            student_name=match_roster_name(student_name, STUDENTS) if student_name else None,
            total_hours=round(totals.total_hours, 2),
            real_hours=round(totals.real_hours, 2),
            simulator_hours=round(totals.simulator_hours, 2),
            trainer_hours=round(totals.trainer_hours, 2),
            sim_trainer_hours=round(totals.sim_trainer_hours, 2),
        )

    def progress(self, student_name: str) -> StudentProgressDTO:
        progress = self.aggregator.student_progress(
            self.store.list(), match_roster_name(student_name, STUDENTS)
        )
        return StudentProgressDTO(
            student_name=progress.student_name,
            modules=[
                ModuleProgressDTO(
                    code=m.code,
                    label=m.label,
                    required=m.required,
                    completed=m.completed,
                    percentage=m.percentage,
                    completed_sessions=m.completed_sessions,
                )
                for m in progress.modules
            ],
        )

    def all_progress(self) -> List[StudentProgressDTO]:
        return [self.progress(student) for student in self.aggregator.roster]

    def flight_meter(self) -> List[FlightMeterEntryDTO]:
        return [
            FlightMeterEntryDTO(
                student_name=e.student_name,
                real_hours=round(e.real_hours, 2),
                sim_hours=round(e.sim_hours, 2),
                total_hours=round(e.total_hours, 2),
                goal_real_hours=e.goal_real_hours,
                goal_sim_hours=e.goal_sim_hours,
                goal_total_hours=e.goal_total_hours,
            )
            for e in self.aggregator.flight_meter(self.store.list())
        ]

    def grade_summary(self, student_name: str) -> GradeSummaryDTO:
        summary = self.aggregator.grade_summary(
            self.store.list(), match_roster_name(student_name, STUDENTS)
        )
        return GradeSummaryDTO(
            student_name=summary.student_name,
            flights=summary.flights,
            passed=summary.passed,
            failed=summary.failed,
            not_evaluable=summary.not_evaluable,
            average_grade=summary.average_grade,
        )
