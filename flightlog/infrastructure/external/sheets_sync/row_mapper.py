"""
Mapeo de filas de la hoja central a FlightLogRecord.

Las filas llegan sin tipar: cabeceras en español, fechas como texto
DD/MM/YYYY o timestamps ISO, numeros como texto o como numero, y las
aproximaciones en un formato de texto propio ("2x ILS @ LEGR, 1x VOR @ LEBA").

Cada fila se procesa por separado: una fila mal formada se descarta y el
resto del lote sigue adelante.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Any, Iterable, List

from loguru import logger

from flightlog.domain.entities.flight_log import Approach, FlightLogRecord
from flightlog.shared.constants.logbook_constants import (
    FLIGHT_TYPE_CODES,
    MAX_SESSION_HOURS,
    SIMULATOR_REGISTRATIONS,
    FlightType,
    ValidationStatus,
)
from flightlog.shared.utils.date_utils import parse_sheet_date

from .types import FlightColumns, MalformedRowError, RemoteFlightRow, cell_to_text

_APPROACH_RE = re.compile(r"^(\d+)\s*x\s*([A-Za-z]+)\s*@\s*(\S(?:.*\S)?)$", re.IGNORECASE)


def parse_flight_type(value: Any) -> FlightType:
    """R -> Real, S -> Simulador, E -> Entrenador; cualquier otro valor es Real."""
    code = cell_to_text(value).upper()
    return FLIGHT_TYPE_CODES.get(code, FlightType.REAL)


def flight_type_code(flight_type: FlightType) -> str:
    """Inverso de parse_flight_type."""
    for code, ft in FLIGHT_TYPE_CODES.items():
        if ft == flight_type:
            return code
    return "R"


def effective_flight_type(flight_type: FlightType, registration: str) -> FlightType:
    """Las matriculas de simulador (ET-105, ET-106) son siempre Simulador."""
    if (registration or "").strip().upper() in SIMULATOR_REGISTRATIONS:
        return FlightType.SIMULATOR
    return flight_type


def parse_duration_minutes(value: Any) -> int:
    """
    Horas decimales ("1.5", "1,5" o 1.5) -> minutos enteros.

    Redondeo half-up, como Math.round. Vacio equivale a 0. Se rechazan
    duraciones por encima de MAX_SESSION_HOURS.

    Raises:
        ValueError: texto no numerico, duracion negativa o fuera de rango
    """
    text = cell_to_text(value).replace(",", ".")
    if not text:
        return 0
    hours = float(text)
    if math.isnan(hours) or math.isinf(hours):
        raise ValueError(f"Duracion no valida: {value!r}")
    if hours < 0:
        raise ValueError(f"Duracion negativa: {value!r}")
    if hours > MAX_SESSION_HOURS:
        raise ValueError(f"Duracion fuera de rango (max {MAX_SESSION_HOURS} h): {value!r}")
    return int(math.floor(hours * 60 + 0.5))


def parse_approaches(value: Any) -> List[Approach]:
    """
    Interpreta la columna MANIOBRAS.

    Formato por entrada: "<n>x <TIPO> @ <LUGAR>", separadas por comas.
    Las entradas que no cumplen el formato se ignoran.
    """
    text = cell_to_text(value)
    if not text:
        return []

    approaches: List[Approach] = []
    for chunk in text.split(","):
        match = _APPROACH_RE.match(chunk.strip())
        if not match:
            if chunk.strip():
                logger.debug(f"Maniobra ignorada (formato no reconocido): {chunk.strip()!r}")
            continue
        count, kind, place = match.groups()
        approaches.append(Approach(type=kind.upper(), count=int(count), place=place))
    return approaches


def encode_approaches(approaches: Iterable[Approach]) -> str:
    """Serializa aproximaciones al formato de la columna MANIOBRAS."""
    return ", ".join(
        f"{a.count}x {a.type} @ {a.place}" for a in approaches if a.count > 0 and a.place
    )


def map_flight_row(row: RemoteFlightRow, *, tz_name: str = "Europe/Madrid") -> FlightLogRecord:
    """
    Convierte una fila de la hoja en un FlightLogRecord sin id.

    El id lo asigna despues el reconciliador.

    Raises:
        MalformedRowError: si la fila no tiene fecha, alumno o sesion validos
    """
    if not isinstance(row, dict):
        raise MalformedRowError(f"Fila no es un objeto: {type(row).__name__}")

    try:
        flight_date = parse_sheet_date(row.get(FlightColumns.DATE), tz_name)
    except ValueError as e:
        raise MalformedRowError(f"Fecha invalida: {e}", row) from e

    student = cell_to_text(row.get(FlightColumns.STUDENT))
    session = cell_to_text(row.get(FlightColumns.SESSION))
    if not student:
        raise MalformedRowError("Fila sin alumno", row)
    if not session:
        raise MalformedRowError("Fila sin sesion", row)

    try:
        minutes = parse_duration_minutes(row.get(FlightColumns.TIME))
    except ValueError as e:
        raise MalformedRowError(f"Tiempo invalido: {e}", row) from e

    return FlightLogRecord(
        id="",
        date=flight_date,
        student_name=student,
        instructor_name=cell_to_text(row.get(FlightColumns.INSTRUCTOR)),
        session=session,
        flight_type=parse_flight_type(row.get(FlightColumns.FLIGHT_TYPE)),
        # Siempre texto: conviven notas numericas y etiquetas APTO / NO APTO
        grade=cell_to_text(row.get(FlightColumns.GRADE)),
        total_time=minutes,
        approaches=parse_approaches(row.get(FlightColumns.APPROACHES)),
        aircraft_registration=cell_to_text(row.get(FlightColumns.REGISTRATION)),
        departure_place=cell_to_text(row.get(FlightColumns.DEPARTURE)),
        arrival_place=cell_to_text(row.get(FlightColumns.ARRIVAL)),
        procedures=cell_to_text(row.get(FlightColumns.PROCEDURES)),
        remarks=cell_to_text(row.get(FlightColumns.REMARKS)),
        validation_status=ValidationStatus.PENDING,
    )


@dataclass
class MappingResult:
    records: List[FlightLogRecord] = field(default_factory=list)
    rejected: List[MalformedRowError] = field(default_factory=list)


def map_flight_rows(rows: Iterable[RemoteFlightRow], *, tz_name: str = "Europe/Madrid") -> MappingResult:
    """
    Mapea un lote completo. Las filas rechazadas se acumulan en
    `rejected` y se registran; nunca abortan el lote.
    """
    result = MappingResult()
    for index, row in enumerate(rows):
        try:
            result.records.append(map_flight_row(row, tz_name=tz_name))
        except MalformedRowError as e:
            logger.warning(f"Fila {index + 2} de vuelos descartada: {e.reason}")
            result.rejected.append(e)
    return result
