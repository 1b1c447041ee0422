"""
Cliente de lectura de la hoja central (Google Apps Script Web App).

El Web App expone cada pestaña como un array JSON de objetos
(cabecera -> valor):

    GET <endpoint>?table=flights
    GET <endpoint>?table=validations

Sin reintentos: un fallo de red o un payload inesperado aborta el sync
completo y el almacen local no se toca.
"""

from __future__ import annotations

from typing import Any, List, Optional

import requests
from loguru import logger

from .types import RemoteTable, SheetsApiError


class SheetsClient:
    """
    Cliente HTTP sincrono de la hoja central.

    Importante:
    - No interpreta las filas: eso lo hace row_mapper.
    - Solo valida la forma del payload (debe ser un array).
    """

    def __init__(
        self,
        endpoint: str,
        *,
        session: Optional[requests.Session] = None,
        timeout_s: Optional[float] = None,
    ) -> None:
        if not endpoint:
            raise SheetsApiError("LOGBOOK_ENDPOINT no configurado")
        self._endpoint = endpoint
        self._timeout_s = timeout_s
        self._session = session or requests.Session()

    def fetch_table(self, table: str) -> List[Any]:
        """
        Descarga una pestaña completa.

        Raises:
            SheetsApiError: estado HTTP no 2xx, JSON invalido o payload que no es array
            requests.RequestException: error de transporte
        """
        resp = self._session.request(
            method="GET",
            url=self._endpoint,
            params={"table": table},
            timeout=self._timeout_s,
        )

        if not 200 <= resp.status_code < 300:
            raise SheetsApiError(
                f"Hoja central respondio {resp.status_code} para table={table}: {resp.text[:200]}"
            )

        try:
            payload = resp.json()
        except ValueError as e:
            raise SheetsApiError(f"Respuesta no es JSON valido para table={table}") from e

        if not isinstance(payload, list):
            raise SheetsApiError(
                f"Se esperaba un array para table={table}, llego {type(payload).__name__}"
            )

        logger.debug(f"Hoja central: {len(payload)} fila(s) en '{table}'")
        return payload

    def fetch_flights(self) -> List[Any]:
        return self.fetch_table(RemoteTable.FLIGHTS)

    def fetch_validations(self) -> List[Any]:
        return self.fetch_table(RemoteTable.VALIDATIONS)

    def close(self) -> None:
        self._session.close()
