"""
Interfaz del almacen local de vuelos.
Define el contrato que debe cumplir cualquier implementacion.
"""
from abc import ABC, abstractmethod
from typing import Callable, Iterable, List, Optional

from flightlog.domain.entities.flight_log import FlightLogRecord


RecordPredicate = Callable[[FlightLogRecord], bool]


class IRecordStore(ABC):
    """
    Almacen local de FlightLogRecord.

    Es el unico propietario de los ids locales. No lanza excepciones:
    las lecturas fallidas devuelven colecciones vacias y las escrituras
    fallidas devuelven False. Un solo escritor por construccion.
    """

    @abstractmethod
    def list(self) -> List[FlightLogRecord]:
        """
        Obtiene todos los vuelos guardados.

        Returns:
            List[FlightLogRecord]: Vuelos, mas recientes primero
        """
        pass

    @abstractmethod
    def get(self, record_id: str) -> Optional[FlightLogRecord]:
        """
        Obtiene un vuelo por su id local.

        Returns:
            Optional[FlightLogRecord]: Vuelo encontrado o None
        """
        pass

    @abstractmethod
    def put(self, record: FlightLogRecord) -> bool:
        """
        Inserta el vuelo si el id no existe o lo reemplaza en su lugar.
        Aplicar dos veces el mismo registro no tiene efecto adicional.
        """
        pass

    @abstractmethod
    def delete(self, record_id: str) -> bool:
        """Elimina un vuelo. Retorna True si existia."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Vacia el almacen."""
        pass

    @abstractmethod
    def replace_all(self, records: Iterable[FlightLogRecord]) -> bool:
        """
        Reemplaza el conjunto completo de vuelos en una sola operacion.
        Si falla, el conjunto anterior queda intacto.
        """
        pass

    def aggregate(self, predicate: RecordPredicate) -> List[FlightLogRecord]:
        """Vuelos que cumplen `predicate`."""
        return [r for r in self.list() if predicate(r)]
