"""
Entidades del dominio.
"""
from flightlog.domain.entities.flight_log import Approach, FlightLogRecord, build_composite_key
from flightlog.domain.entities.logbook_stats import (
    FlightMeterEntry,
    GradeSummary,
    HourTotals,
    ModuleProgress,
    StudentProgress,
)

__all__ = [
    "Approach",
    "FlightLogRecord",
    "build_composite_key",
    "FlightMeterEntry",
    "GradeSummary",
    "HourTotals",
    "ModuleProgress",
    "StudentProgress",
]
