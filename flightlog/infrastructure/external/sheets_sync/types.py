"""
Tipos y utilidades puras para el pipeline hoja central -> almacen local.

Se mantienen libres de I/O para poder testearlos facilmente.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from flightlog.shared.constants.logbook_constants import ValidationStatus

# Fila de la hoja tal como llega en el JSON (cabecera -> valor)
RemoteFlightRow = Dict[str, Any]
RemoteValidationRow = Dict[str, Any]


class SheetsApiError(RuntimeError):
    """Error de integracion con la hoja central (payload o transporte)."""


class MalformedRowError(ValueError):
    """Una fila de la hoja no se puede convertir en un vuelo."""

    def __init__(self, reason: str, row: Optional[RemoteFlightRow] = None):
        super().__init__(reason)
        self.reason = reason
        self.row = row


# Columnas de la pestaña de vuelos (primera hoja)
class FlightColumns:
    STUDENT = "ALUMNO"
    SESSION = "SESIÓN"
    DATE = "FECHA"
    INSTRUCTOR = "INSTRUCTOR"
    REGISTRATION = "MATRÍCULA"
    TIME = "TIEMPO"
    FLIGHT_TYPE = "REAL / SIM"
    GRADE = "PUNTUACIÓN"
    REMARKS = "OBSERVACIONES"
    DEPARTURE = "LUGAR SALIDA"
    ARRIVAL = "LUGAR LLEGADA"
    PROCEDURES = "PROCEDIMIENTOS"
    APPROACHES = "MANIOBRAS"


# Columnas de la pestaña "Validaciones"
class ValidationColumns:
    ACTION_DATE = "FECHA_ACCION"
    FLIGHT_ID = "ID_VUELO"
    STATUS = "ESTADO"
    FEEDBACK = "FEEDBACK"
    GRADE = "NOTA"
    REMARKS = "OBS_VALIDACION"


class RemoteTable:
    """Valores del parametro `table` del endpoint de lectura."""
    FLIGHTS = "flights"
    VALIDATIONS = "validations"


@dataclass(frozen=True)
class ValidationDecision:
    """Decision de validacion leida de la hoja para una clave compuesta."""

    status: ValidationStatus
    feedback: Optional[str] = None
    grade: Optional[str] = None
    remarks: Optional[str] = None


def cell_to_text(value: Any) -> str:
    """
    Convierte una celda a texto sin perder su forma.

    Los numeros enteros guardados como float (8.0) se muestran como "8",
    igual que los muestra la hoja.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def optional_text(value: Any) -> Optional[str]:
    text = cell_to_text(value)
    return text or None
