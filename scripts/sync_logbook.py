"""
CLI: hoja central -> almacen local (one-way sync).

Uso recomendado:
  - Ejecutar como job (cron/systemd timer) o a mano antes de revisar vuelos.
  - El endpoint POST /api/v1/sync hace lo mismo desde la UI.

Variables de entorno requeridas:
  - LOGBOOK_ENDPOINT (URL del Web App de Apps Script)
  - DATABASE_URL (opcional, SQLite local por defecto)

Ejecución:
  python scripts/sync_logbook.py
  python scripts/sync_logbook.py --dry-run
  python scripts/sync_logbook.py --endpoint https://script.google.com/macros/s/.../exec
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import requests
from loguru import logger
from dotenv import load_dotenv

# Permite ejecutar este script desde cualquier cwd sin configurar PYTHONPATH.
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

# Cargar variables desde .env antes de construir la configuracion global.
load_dotenv(_PROJECT_ROOT / ".env", override=False)

from flightlog.core.config import settings
from flightlog.infrastructure.database.session import SessionLocal, init_db
from flightlog.infrastructure.external.sheets_sync.sync_service import (
    StoreReplaceError,
    SyncConfigError,
    build_from_settings,
)
from flightlog.infrastructure.external.sheets_sync.types import SheetsApiError
from flightlog.infrastructure.repositories.flight_log_repository import SqlRecordStore


def main() -> int:
    parser = argparse.ArgumentParser(description="Sync hoja central -> almacen local")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Descarga y procesa la hoja pero no modifica el almacen local.",
    )
    parser.add_argument(
        "--endpoint",
        default=None,
        help="URL del Web App (por defecto LOGBOOK_ENDPOINT).",
    )
    args = parser.parse_args()

    logger.remove()
    logger.add(sys.stderr, level=settings.LOG_LEVEL)

    init_db()
    store = SqlRecordStore(SessionLocal)

    try:
        service = build_from_settings(store, endpoint=args.endpoint)
    except SyncConfigError as e:
        logger.error(str(e))
        return 2

    try:
        result = service.run_once(dry_run=args.dry_run)
    except (SheetsApiError, requests.RequestException, StoreReplaceError) as e:
        logger.error(f"Sync fallido, almacen local sin cambios: {e}")
        return 1
    finally:
        service.close()

    logger.info(
        f"Sync OK: importados={result.imported}, descartados={result.rejected_rows}, "
        f"aplicado={'si' if result.applied else 'no (dry-run)'}"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
