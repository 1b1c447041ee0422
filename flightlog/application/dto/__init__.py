"""
Data Transfer Objects (DTOs) para la capa de aplicacion.
"""
from .flight_log_dto import (
    ApproachDTO,
    FlightLogCreateDTO,
    FlightLogDTO,
    ValidateFlightDTO,
    RejectFlightDTO,
    BulkValidationResultDTO,
)
from .stats_dto import (
    HourTotalsDTO,
    ModuleProgressDTO,
    StudentProgressDTO,
    FlightMeterEntryDTO,
    GradeSummaryDTO,
)
from .sync_dto import SyncResultDTO, LoginEventDTO, LoginAckDTO

__all__ = [
    "ApproachDTO",
    "FlightLogCreateDTO",
    "FlightLogDTO",
    "ValidateFlightDTO",
    "RejectFlightDTO",
    "BulkValidationResultDTO",
    "HourTotalsDTO",
    "ModuleProgressDTO",
    "StudentProgressDTO",
    "FlightMeterEntryDTO",
    "GradeSummaryDTO",
    "SyncResultDTO",
    "LoginEventDTO",
    "LoginAckDTO",
]
