"""
Servicios de aplicacion.

Contiene la logica de negocio reutilizable que no pertenece
a un caso de uso especifico.
"""
from flightlog.application.services.stats_aggregator import StatsAggregator
from flightlog.application.services.validation_policy import (
    ALLOWED_TRANSITIONS,
    can_transition,
    ensure_transition,
    is_passing_grade,
    normalize_grade,
    parse_numeric_grade,
    rejection_feedback,
)

__all__ = [
    # Estadisticas
    "StatsAggregator",
    # Ciclo de validacion
    "ALLOWED_TRANSITIONS",
    "can_transition",
    "ensure_transition",
    "is_passing_grade",
    "normalize_grade",
    "parse_numeric_grade",
    "rejection_feedback",
]
