"""
Cruce de la pestaña "Validaciones" con los vuelos recien sincronizados.

La hoja de validaciones es de solo-append: cada accion de validar o rechazar
añade una fila con la clave compuesta del vuelo. Para una misma clave gana
la ultima fila añadida. Tras un sync este cruce es la unica fuente del
estado de validacion: cualquier estado local que no este en la hoja vuelve
a pendiente.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

from loguru import logger

from flightlog.domain.entities.flight_log import FlightLogRecord
from flightlog.shared.constants.logbook_constants import ValidationStatus

from .types import (
    RemoteValidationRow,
    ValidationColumns,
    ValidationDecision,
    cell_to_text,
    optional_text,
)


def parse_validation_status(value) -> ValidationStatus:
    """Texto de la columna ESTADO -> ValidationStatus (desconocido = pendiente)."""
    text = cell_to_text(value).lower()
    try:
        return ValidationStatus(text)
    except ValueError:
        return ValidationStatus.PENDING


def build_validation_index(rows: Iterable[RemoteValidationRow]) -> Dict[str, ValidationDecision]:
    """
    Clave compuesta -> ultima decision de validacion.

    Las filas sin ID_VUELO se ignoran.
    """
    index: Dict[str, ValidationDecision] = {}
    skipped = 0
    for row in rows:
        if not isinstance(row, dict):
            skipped += 1
            continue
        key = cell_to_text(row.get(ValidationColumns.FLIGHT_ID))
        if not key:
            skipped += 1
            continue
        # Append-only: la fila mas reciente sobrescribe a las anteriores
        index[key] = ValidationDecision(
            status=parse_validation_status(row.get(ValidationColumns.STATUS)),
            feedback=optional_text(row.get(ValidationColumns.FEEDBACK)),
            grade=optional_text(row.get(ValidationColumns.GRADE)),
            remarks=optional_text(row.get(ValidationColumns.REMARKS)),
        )
    if skipped:
        logger.warning(f"{skipped} fila(s) de validaciones sin ID_VUELO ignoradas")
    return index


def apply_validations(
    records: Iterable[FlightLogRecord],
    decisions: Dict[str, ValidationDecision],
) -> List[FlightLogRecord]:
    """
    Adjunta a cada vuelo su decision remota; sin decision queda pendiente.
    """
    merged: List[FlightLogRecord] = []
    for record in records:
        decision = decisions.get(record.composite_key())
        if decision is None:
            merged.append(record.with_changes(
                validation_status=ValidationStatus.PENDING,
                student_feedback=None,
                validation_remarks=None,
            ))
            continue

        changes = {
            "validation_status": decision.status,
            "student_feedback": decision.feedback,
            "validation_remarks": decision.remarks,
        }
        if decision.grade:
            changes["grade"] = decision.grade
        merged.append(record.with_changes(**changes))
    return merged
