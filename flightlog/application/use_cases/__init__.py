"""
Casos de uso de la aplicacion.
"""
from .flight_log_use_cases import FlightLogUseCases
from .validation_use_cases import ValidationUseCases
from .sync_use_cases import SyncUseCases
from .stats_use_cases import StatsUseCases
from .access_use_cases import AccessUseCases

__all__ = [
    "FlightLogUseCases",
    "ValidationUseCases",
    "SyncUseCases",
    "StatsUseCases",
    "AccessUseCases",
]
