"""
Reglas puras del ciclo de validacion de vuelos.

Este modulo NO toca el almacen, la red ni FastAPI.
Define las transiciones permitidas y como se interpretan las notas.

Transiciones:
    pending   -> validated | rejected
    rejected  -> validated
    validated -> validated   (re-validar corrige la nota)
"""

from __future__ import annotations

import re
from typing import Dict, FrozenSet, Optional

from flightlog.shared.constants.logbook_constants import (
    DEFAULT_REJECTION_FEEDBACK,
    PASSING_GRADE,
    GradeLabel,
    ValidationStatus,
)
from flightlog.shared.exceptions.domain import InvalidTransitionException, ValidationException

ALLOWED_TRANSITIONS: Dict[ValidationStatus, FrozenSet[ValidationStatus]] = {
    ValidationStatus.PENDING: frozenset({ValidationStatus.VALIDATED, ValidationStatus.REJECTED}),
    ValidationStatus.REJECTED: frozenset({ValidationStatus.VALIDATED}),
    ValidationStatus.VALIDATED: frozenset({ValidationStatus.VALIDATED}),
}

_NUMERIC_GRADE_RE = re.compile(r"^\d+(?:[.,]\d+)?$")
_GRADE_LABELS = {label.value for label in GradeLabel}


def can_transition(current: ValidationStatus, target: ValidationStatus) -> bool:
    return target in ALLOWED_TRANSITIONS.get(current, frozenset())


def ensure_transition(current: ValidationStatus, target: ValidationStatus) -> None:
    """
    Raises:
        InvalidTransitionException: si `current -> target` no esta permitido
    """
    if not can_transition(current, target):
        allowed = ALLOWED_TRANSITIONS.get(current, frozenset())
        raise InvalidTransitionException(
            current.value, target.value, [s.value for s in allowed]
        )


def parse_numeric_grade(grade: Optional[str]) -> Optional[float]:
    """
    "7,5" -> 7.5. Devuelve None si la nota no es numerica.
    """
    text = (grade or "").strip()
    if not _NUMERIC_GRADE_RE.match(text):
        return None
    return float(text.replace(",", "."))


def normalize_grade(grade: Optional[str]) -> str:
    """
    Valida la nota de una validacion y la devuelve recortada.

    Se acepta un numero entre 0 y 10 (con punto o coma decimal) o una de
    las etiquetas APTO / NO APTO / NO EVALUABLE (sin distinguir mayusculas).
    Se guarda tal cual se escribio.

    Raises:
        ValidationException: nota vacia o no reconocida
    """
    text = (grade or "").strip()
    if not text:
        raise ValidationException("La nota es obligatoria para validar un vuelo", field="grade")

    label = " ".join(text.upper().split())
    if label in _GRADE_LABELS:
        return text

    value = parse_numeric_grade(text)
    if value is None or not 0 <= value <= 10:
        raise ValidationException(
            f"Nota no valida: {text!r}. Usa un valor 0-10 o APTO / NO APTO / NO EVALUABLE",
            field="grade",
        )
    return text


def rejection_feedback(feedback: Optional[str]) -> str:
    """Motivo de rechazo; vacio equivale a "Sin especificar"."""
    text = (feedback or "").strip()
    return text or DEFAULT_REJECTION_FEEDBACK


def is_passing_grade(grade: Optional[str]) -> Optional[bool]:
    """
    True si la nota es apta, False si no lo es, None si no es evaluable.

    - Numerica: apta si >= 5
    - Texto: apta si contiene APTO pero no NO APTO
    """
    text = " ".join((grade or "").strip().upper().split())
    if not text or text == GradeLabel.NO_EVALUABLE.value:
        return None

    value = parse_numeric_grade(text)
    if value is not None:
        return value >= PASSING_GRADE

    return GradeLabel.APTO.value in text and GradeLabel.NO_APTO.value not in text
