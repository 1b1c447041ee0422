"""
Dependencias para inyección del almacen local y de los clientes de la hoja central.
"""
from functools import lru_cache

from flightlog.core.config import settings
from flightlog.domain.repositories.record_store import IRecordStore
from flightlog.infrastructure.database.session import SessionLocal
from flightlog.infrastructure.external.sheets_sync.sheets_publisher import SheetsPublisher
from flightlog.infrastructure.repositories.flight_log_repository import SqlRecordStore


@lru_cache
def get_record_store() -> IRecordStore:
    """
    Dependencia para obtener el almacen local de vuelos.

    Returns:
        IRecordStore: almacen compartido por todo el proceso
    """
    return SqlRecordStore(SessionLocal)


@lru_cache
def get_sheets_publisher() -> SheetsPublisher:
    """
    Dependencia para obtener el cliente de escritura de la hoja central.
    """
    return SheetsPublisher(settings.LOGBOOK_ENDPOINT, timeout_s=settings.REMOTE_TIMEOUT_S)
