"""
Dependencias para inyeccion de casos de uso.
"""
from fastapi import Depends

from flightlog.application.use_cases.access_use_cases import AccessUseCases
from flightlog.application.use_cases.flight_log_use_cases import FlightLogUseCases
from flightlog.application.use_cases.stats_use_cases import StatsUseCases
from flightlog.application.use_cases.sync_use_cases import SyncUseCases
from flightlog.application.use_cases.validation_use_cases import ValidationUseCases
from flightlog.domain.repositories.record_store import IRecordStore
from flightlog.infrastructure.external.sheets_sync.sheets_publisher import SheetsPublisher
from flightlog.infrastructure.external.sheets_sync.sync_service import build_from_settings
from flightlog.api.v1.dependencies.repository_deps import get_record_store, get_sheets_publisher


def get_flight_log_use_cases(
    store: IRecordStore = Depends(get_record_store),
    publisher: SheetsPublisher = Depends(get_sheets_publisher),
) -> FlightLogUseCases:
    """
    Dependencia para obtener los casos de uso de vuelos.

    Returns:
        FlightLogUseCases: Instancia de casos de uso de vuelos
    """
    return FlightLogUseCases(store, publisher)


def get_validation_use_cases(
    store: IRecordStore = Depends(get_record_store),
    publisher: SheetsPublisher = Depends(get_sheets_publisher),
) -> ValidationUseCases:
    """
    Dependencia para obtener los casos de uso de validacion.

    Returns:
        ValidationUseCases: Instancia de casos de uso de validacion
    """
    return ValidationUseCases(store, publisher)


def get_sync_use_cases(
    store: IRecordStore = Depends(get_record_store),
) -> SyncUseCases:
    """
    Dependencia para obtener los casos de uso de sincronizacion.
    El pipeline se construye en cada corrida para leer la configuracion vigente.
    """
    return SyncUseCases(lambda: build_from_settings(store))


def get_stats_use_cases(
    store: IRecordStore = Depends(get_record_store),
) -> StatsUseCases:
    return StatsUseCases(store)


def get_access_use_cases(
    publisher: SheetsPublisher = Depends(get_sheets_publisher),
) -> AccessUseCases:
    return AccessUseCases(publisher)
