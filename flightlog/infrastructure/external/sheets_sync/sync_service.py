"""
Servicio de sincronizacion hoja central -> almacen local.

Diseño (resumen):
- Descarga completa de las pestañas de vuelos y validaciones
- Mapea cada fila de vuelo a FlightLogRecord (descartando filas malas)
- Reutiliza los ids locales por clave compuesta (reconciler)
- Aplica la ultima decision de validacion de cada vuelo (validation_merge)
- Reemplaza el almacen local en una sola operacion

Estrategia de idempotencia:
- Sin cambios en la hoja, dos corridas seguidas producen exactamente el
  mismo conjunto (mismos ids, mismos estados).
- Si cualquier descarga falla no se toca el almacen.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from loguru import logger

from flightlog.domain.repositories.record_store import IRecordStore
from flightlog.shared.constants.logbook_constants import ValidationStatus

from .reconciler import reconcile_identities
from .row_mapper import map_flight_rows
from .sheets_client import SheetsClient
from .validation_merge import apply_validations, build_validation_index


class SyncConfigError(RuntimeError):
    """Error de configuracion del pipeline."""


class StoreReplaceError(RuntimeError):
    """El almacen local rechazo el reemplazo completo."""


@dataclass(frozen=True)
class SyncResult:
    fetched_rows: int
    imported: int
    rejected_rows: int
    validated: int
    rejected: int
    pending: int
    applied: bool


class LogbookSync:
    """
    Orquestador del pipeline de sincronizacion.
    """

    def __init__(
        self,
        *,
        store: IRecordStore,
        client: SheetsClient,
        tz_name: str = "Europe/Madrid",
    ) -> None:
        self._store = store
        self._client = client
        self._tz_name = tz_name

    def close(self) -> None:
        """Libera la sesion HTTP del cliente de la hoja central."""
        self._client.close()

    def run_once(self, *, dry_run: bool = False) -> SyncResult:
        """
        Ejecuta una corrida completa.

        Raises:
            SheetsApiError: payload invalido de la hoja central
            requests.RequestException: error de transporte
            StoreReplaceError: el almacen no pudo reemplazar el conjunto
        """
        logger.info("Sync: descargando hoja central")
        flight_rows = self._client.fetch_flights()
        validation_rows = self._client.fetch_validations()

        mapping = map_flight_rows(flight_rows, tz_name=self._tz_name)
        reconciled = reconcile_identities(mapping.records, self._store.list())
        decisions = build_validation_index(validation_rows)
        merged = apply_validations(reconciled, decisions)

        if dry_run:
            logger.info("Sync en modo dry-run: el almacen local no se modifica")
        elif not self._store.replace_all(merged):
            raise StoreReplaceError("No se pudo reemplazar el almacen local")

        result = SyncResult(
            fetched_rows=len(flight_rows),
            imported=len(merged),
            rejected_rows=len(mapping.rejected),
            validated=sum(1 for r in merged if r.validation_status == ValidationStatus.VALIDATED),
            rejected=sum(1 for r in merged if r.validation_status == ValidationStatus.REJECTED),
            pending=sum(1 for r in merged if r.validation_status == ValidationStatus.PENDING),
            applied=not dry_run,
        )
        logger.info(
            f"Sync completado. filas={result.fetched_rows}, importados={result.imported}, "
            f"descartados={result.rejected_rows}, validados={result.validated}, "
            f"rechazados={result.rejected}, pendientes={result.pending}"
        )
        return result


def build_from_settings(
    store: IRecordStore,
    *,
    endpoint: Optional[str] = None,
) -> LogbookSync:
    """
    Constructor "oficial" del pipeline a partir de la configuracion global.
    Quien lo construye debe llamar a `close()` al terminar.

    Env vars requeridas:
    - LOGBOOK_ENDPOINT
    """
    from flightlog.core.config import settings

    url = endpoint or settings.LOGBOOK_ENDPOINT
    if not url:
        raise SyncConfigError("Falta variable de entorno obligatoria: LOGBOOK_ENDPOINT")

    client = SheetsClient(url, timeout_s=settings.REMOTE_TIMEOUT_S)
    return LogbookSync(store=store, client=client, tz_name=settings.SHEET_TIMEZONE)
