"""
Reconciliacion de identidad entre la hoja central y el almacen local.

La hoja no expone un identificador estable por fila, asi que cada vuelo se
identifica por su clave compuesta (fecha|alumno|sesion). Si un vuelo local
tiene la misma clave se reutiliza su id: las vistas abiertas por id siguen
siendo validas tras refrescar, y sincronizar dos veces seguidas sin cambios
no genera ids nuevos.
"""

from __future__ import annotations

import uuid
from typing import Callable, Dict, Iterable, List

from loguru import logger

from flightlog.domain.entities.flight_log import FlightLogRecord

IdFactory = Callable[[], str]


def new_record_id() -> str:
    return str(uuid.uuid4())


def index_by_composite_key(records: Iterable[FlightLogRecord]) -> Dict[str, str]:
    """
    Clave compuesta -> id local. Con claves repetidas gana el primer
    registro encontrado.
    """
    index: Dict[str, str] = {}
    for record in records:
        index.setdefault(record.composite_key(), record.id)
    return index


def reconcile_identities(
    remote_records: Iterable[FlightLogRecord],
    local_records: Iterable[FlightLogRecord],
    *,
    id_factory: IdFactory = new_record_id,
) -> List[FlightLogRecord]:
    """
    Asigna ids a los vuelos recien mapeados.

    - Clave conocida localmente: se reutiliza el id local.
    - Clave nueva: se genera un id.
    - Un id local se entrega como mucho una vez por lote; una segunda fila
      remota con la misma clave recibe un id nuevo.
    """
    known = index_by_composite_key(local_records)
    used_ids: set[str] = set()
    reused = minted = 0

    reconciled: List[FlightLogRecord] = []
    for record in remote_records:
        local_id = known.get(record.composite_key())
        if local_id and local_id not in used_ids:
            record_id = local_id
            reused += 1
        else:
            if local_id:
                logger.warning(f"Clave compuesta repetida en la hoja: {record.composite_key()}")
            record_id = id_factory()
            minted += 1
        used_ids.add(record_id)
        reconciled.append(record.with_changes(id=record_id))

    logger.debug(f"Reconciliacion: {reused} id(s) reutilizados, {minted} nuevo(s)")
    return reconciled
