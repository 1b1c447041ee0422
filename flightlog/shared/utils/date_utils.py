import re
from datetime import date, datetime
from typing import Any
from zoneinfo import ZoneInfo

from dateutil import parser as date_parser

_SHEET_DATE_RE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")


def parse_sheet_date(value: Any, tz_name: str = "Europe/Madrid") -> date:
    """
    Convierte el valor de la columna FECHA de la hoja a una fecha de calendario.

    Acepta DD/MM/YYYY (formato de la hoja), ISO YYYY-MM-DD y cualquier texto
    que dateutil entienda (dia primero). Los timestamps con zona horaria
    (asi serializa Apps Script las celdas de tipo fecha) se llevan a la zona
    de la hoja antes de quedarse con el dia.

    Raises:
        ValueError: si el valor no representa una fecha
    """
    if isinstance(value, datetime):
        return _to_sheet_day(value, tz_name)
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Fecha vacia o no textual: {value!r}")

    raw = value.strip()
    match = _SHEET_DATE_RE.match(raw)
    if match:
        day, month, year = (int(g) for g in match.groups())
        return date(year, month, day)

    try:
        return date.fromisoformat(raw)
    except ValueError:
        pass

    # Timestamp ISO ("2024-08-31T22:00:00.000Z"). Va antes de dateutil:
    # con dayfirst=True dateutil intercambia mes y dia en fechas ISO.
    try:
        return _to_sheet_day(datetime.fromisoformat(raw.replace("Z", "+00:00")), tz_name)
    except ValueError:
        pass

    try:
        parsed = date_parser.parse(raw, dayfirst=True)
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Fecha no reconocida: {raw!r}") from e
    return _to_sheet_day(parsed, tz_name)


def format_sheet_date(value: date) -> str:
    """Formatea una fecha como DD/MM/YYYY, el formato de la hoja."""
    return value.strftime("%d/%m/%Y")


def _to_sheet_day(dt: datetime, tz_name: str) -> date:
    if dt.tzinfo is None:
        return dt.date()
    return dt.astimezone(ZoneInfo(tz_name)).date()
