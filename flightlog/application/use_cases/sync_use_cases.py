"""
Casos de uso para la sincronizacion con la hoja central.
"""
import asyncio
from typing import Callable

import requests
from loguru import logger

from flightlog.application.dto.sync_dto import SyncResultDTO
from flightlog.infrastructure.external.sheets_sync.sync_service import (
    LogbookSync,
    StoreReplaceError,
    SyncConfigError,
)
from flightlog.infrastructure.external.sheets_sync.types import SheetsApiError

# Una sola corrida a la vez por proceso
_sync_lock = asyncio.Lock()


class SyncUseCases:
    """
    Ejecuta el pipeline de sincronizacion fuera del event loop.

    El pipeline es sincrono (requests + SQLAlchemy sync), asi que se lanza
    en un hilo con asyncio.to_thread.
    """

    def __init__(self, sync_factory: Callable[[], LogbookSync]):
        """
        Args:
            sync_factory: construye el LogbookSync (se llama en cada corrida)
        """
        self.sync_factory = sync_factory

    async def run_sync(self, dry_run: bool = False) -> SyncResultDTO:
        if _sync_lock.locked():
            logger.warning("Sync ya esta corriendo. Saliendo.")
            return SyncResultDTO(success=False, message="Ya hay una sincronizacion en curso")

        async with _sync_lock:
            service = None
            try:
                service = self.sync_factory()
                result = await asyncio.to_thread(service.run_once, dry_run=dry_run)
            except SyncConfigError as e:
                logger.error(f"Sync sin configurar: {e}")
                return SyncResultDTO(success=False, message=str(e))
            except (SheetsApiError, requests.RequestException) as e:
                logger.error(f"Error descargando la hoja central: {e}")
                return SyncResultDTO(
                    success=False,
                    message="No se pudo descargar la hoja central; los datos locales no se han modificado",
                )
            except StoreReplaceError as e:
                logger.error(f"Error guardando el resultado del sync: {e}")
                return SyncResultDTO(
                    success=False,
                    message="No se pudo actualizar el almacen local; los datos locales no se han modificado",
                )
            except Exception as e:
                logger.exception(f"Error inesperado durante el sync: {e}")
                return SyncResultDTO(success=False, message=f"Sincronizacion fallida: {e}")
            finally:
                if service is not None:
                    service.close()

        return SyncResultDTO(
            success=True,
            message="Sincronizacion completada" if not dry_run else "Simulacion completada (sin cambios)",
            imported=result.imported,
            rejected_rows=result.rejected_rows,
            validated=result.validated,
            rejected=result.rejected,
            pending=result.pending,
            dry_run=dry_run,
        )
