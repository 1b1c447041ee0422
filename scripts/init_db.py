"""
Script para inicializar el almacen local (crea la tabla de vuelos).
"""
import sys
from pathlib import Path

from loguru import logger

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from flightlog.core.config import settings
from flightlog.infrastructure.database.session import init_db


def main():
    """Función principal para inicializar la base de datos."""
    logger.info(f"Inicializando almacen local en {settings.DATABASE_URL}...")

    try:
        init_db()
        logger.success("Almacen local inicializado correctamente")
    except Exception as e:
        logger.error(f"Error al inicializar el almacen local: {e}")
        raise


if __name__ == "__main__":
    main()
