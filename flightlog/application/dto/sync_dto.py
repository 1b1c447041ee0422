"""
DTOs para la sincronizacion con la hoja central y el registro de accesos.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class SyncResultDTO(BaseModel):
    """
    Resultado de una corrida de sincronizacion.
    Con success=False el almacen local no se ha modificado.
    """
    success: bool
    message: str
    imported: int = 0
    rejected_rows: int = Field(0, description="Filas de la hoja descartadas por mal formadas")
    validated: int = 0
    rejected: int = 0
    pending: int = 0
    dry_run: bool = False


class LoginEventDTO(BaseModel):
    """Inicio de sesion que se anota en la pestaña Logins."""
    username: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    role: str = Field(..., min_length=1, description="admin, instructor o student")
    timestamp: Optional[datetime] = None


class LoginAckDTO(BaseModel):
    queued: bool
