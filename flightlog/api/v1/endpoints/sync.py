"""
Endpoints para sincronizacion con la hoja central.
Permite refrescar el almacen local desde la UI.
"""
from fastapi import APIRouter, Depends, Query

from flightlog.application.dto.sync_dto import SyncResultDTO
from flightlog.application.use_cases.sync_use_cases import SyncUseCases
from flightlog.api.v1.dependencies.use_case_deps import get_sync_use_cases

router = APIRouter(prefix="/sync", tags=["Sync"])


@router.post("", response_model=SyncResultDTO)
async def run_sync(
    dry_run: bool = Query(False, description="Calcula el resultado sin tocar el almacen local"),
    use_cases: SyncUseCases = Depends(get_sync_use_cases),
):
    """
    Descarga la hoja central y reemplaza el almacen local.

    - La hoja manda: el estado de validacion local se sobrescribe.
    - Si la descarga falla, `success=false` y los datos locales no cambian.
    """
    return await use_cases.run_sync(dry_run=dry_run)
