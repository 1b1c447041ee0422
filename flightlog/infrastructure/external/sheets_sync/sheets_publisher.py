"""
Envios a la hoja central (escritura).

Todos los envios son POST form-encoded al mismo Web App; el campo `action`
decide la pestaña de destino (validate, login o, si falta, alta de vuelo).
La respuesta no se interpreta: no hay acuse de recibo ni reintentos.
Un fallo se registra y se devuelve False, nunca se propaga.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, Optional

import httpx
from loguru import logger

from flightlog.domain.entities.flight_log import FlightLogRecord
from flightlog.shared.constants.logbook_constants import ValidationStatus
from flightlog.shared.utils.date_utils import format_sheet_date

from .row_mapper import encode_approaches, effective_flight_type, flight_type_code
from .types import FlightColumns


def format_decimal_hours(minutes: int) -> str:
    """90 -> "1.5", 60 -> "1", 100 -> "1.67"."""
    text = f"{minutes / 60:.2f}".rstrip("0").rstrip(".")
    return text or "0"


def build_flight_form(record: FlightLogRecord) -> Dict[str, str]:
    """
    Fila de alta de vuelo con las cabeceras exactas de la hoja.
    """
    type_code = flight_type_code(
        effective_flight_type(record.flight_type, record.aircraft_registration)
    )

    return {
        FlightColumns.STUDENT: record.student_name,
        FlightColumns.SESSION: record.session,
        FlightColumns.DATE: format_sheet_date(record.date),
        FlightColumns.INSTRUCTOR: record.instructor_name,
        FlightColumns.REGISTRATION: record.aircraft_registration,
        FlightColumns.TIME: format_decimal_hours(record.total_time),
        FlightColumns.FLIGHT_TYPE: type_code,
        FlightColumns.GRADE: record.grade,
        FlightColumns.REMARKS: record.remarks,
        FlightColumns.DEPARTURE: record.departure_place,
        FlightColumns.ARRIVAL: record.arrival_place,
        FlightColumns.PROCEDURES: record.procedures,
        FlightColumns.APPROACHES: encode_approaches(record.approaches),
    }


class SheetsPublisher:
    """
    Cliente asincrono de escritura en la hoja central.
    """

    def __init__(
        self,
        endpoint: str,
        *,
        timeout_s: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.endpoint = endpoint
        self._timeout_s = timeout_s
        self._transport = transport

    async def _post(self, form: Dict[str, str], *, label: str) -> bool:
        if not self.endpoint:
            logger.warning(f"LOGBOOK_ENDPOINT no configurado. Saltando envio de {label}.")
            return False

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout_s,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                await client.post(self.endpoint, data=form)
                return True
        except Exception as e:
            logger.error(f"Error al enviar {label} a la hoja central: {e}")
            return False

    async def send_validation(
        self,
        flight_key: str,
        status: ValidationStatus,
        *,
        feedback: Optional[str] = None,
        grade: Optional[str] = None,
        remarks: Optional[str] = None,
    ) -> bool:
        """
        Añade una fila a la pestaña "Validaciones".

        Args:
            flight_key: clave compuesta del vuelo (fecha|alumno|sesion)
            status: nuevo estado
        """
        form = {
            "action": "validate",
            "flightId": flight_key,
            "status": status.value,
        }
        if feedback:
            form["feedback"] = feedback
        if grade:
            form["grade"] = grade
        if remarks:
            form["remarks"] = remarks
        return await self._post(form, label=f"validacion {flight_key}")

    async def send_new_flight(self, record: FlightLogRecord) -> bool:
        """Añade el vuelo a la primera pestaña de la hoja."""
        return await self._post(build_flight_form(record), label=f"vuelo {record.composite_key()}")

    async def send_login(
        self,
        username: str,
        name: str,
        role: str,
        *,
        timestamp: Optional[datetime] = None,
    ) -> bool:
        """Registra un inicio de sesion en la pestaña "Logins"."""
        form = {
            "action": "login",
            "username": username,
            "name": name,
            "role": role,
            "timestamp": (timestamp or datetime.now().astimezone()).isoformat(),
        }
        return await self._post(form, label=f"login {username}")
