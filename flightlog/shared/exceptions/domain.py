"""
Excepciones relacionadas con la logica de dominio del logbook.
"""
from typing import Any, Iterable

from flightlog.shared.exceptions.base import AppException


class DomainException(AppException):
    """Excepcion base para errores de dominio."""

    def __init__(self, message: str, error_code: str = "DOMAIN_ERROR", details=None):
        super().__init__(
            message=message,
            status_code=400,
            error_code=error_code,
            details=details
        )


class EntityNotFoundException(DomainException):
    """Excepcion cuando no se encuentra una entidad."""

    def __init__(self, entity_name: str, entity_id: Any):
        super().__init__(
            message=f"{entity_name} con ID {entity_id} no encontrado",
            error_code="ENTITY_NOT_FOUND",
            details={"entity": entity_name, "id": str(entity_id)}
        )
        self.status_code = 404


class ValidationException(DomainException):
    """Excepcion para errores de validacion de datos de entrada."""

    def __init__(self, message: str, field: str = None):
        details = {"field": field} if field else None
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            details=details
        )


class InvalidTransitionException(DomainException):
    """Excepcion cuando un vuelo no puede pasar al estado de validacion pedido."""

    def __init__(self, current: str, target: str, allowed: Iterable[str]):
        super().__init__(
            message=f"Transicion no permitida: {current} -> {target}",
            error_code="INVALID_TRANSITION",
            details={
                "current": current,
                "target": target,
                "allowed": sorted(allowed),
            }
        )
        self.status_code = 409


class PersistenceException(AppException):
    """Excepcion cuando el almacen local no acepta una escritura."""

    def __init__(self, message: str, entity_id: Any = None):
        super().__init__(
            message=message,
            status_code=500,
            error_code="PERSISTENCE_ERROR",
            details={"id": str(entity_id)} if entity_id is not None else None
        )
