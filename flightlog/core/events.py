"""
Manejadores de inicio y cierre de la aplicacion.
"""
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from loguru import logger

from flightlog.core.config import settings
from flightlog.infrastructure.database.session import init_db, close_db
from flightlog.shared.utils.background import drain_pending, pending_count


async def startup(app: FastAPI) -> None:
    """Inicializa recursos al inicio de la aplicacion."""
    try:
        logger.info(f"Iniciando {settings.APP_NAME} v{settings.APP_VERSION}")
        logger.info(f"Entorno: {settings.ENVIRONMENT}")

        # Validar configuracion critica
        _validate_config()

        # Inicializar almacen local (crea tablas si no existen)
        init_db()
        logger.info("Almacen local inicializado")

        # Configurar logging adicional
        logger.add(
            settings.LOG_FILE,
            rotation="500 MB",
            retention="10 days",
            level=settings.LOG_LEVEL
        )

        logger.success("Aplicacion iniciada correctamente")

        _print_available_urls()

    except Exception as e:
        logger.error(f"Error durante startup: {e}")
        logger.exception("Detalle del error:")
        raise


def _validate_config() -> None:
    """Valida que la configuracion critica este presente."""
    warnings = []

    if not settings.LOGBOOK_ENDPOINT:
        warnings.append("LOGBOOK_ENDPOINT no configurado - sync y envios a la hoja desactivados")

    for warning in warnings:
        logger.warning(f"CONFIG: {warning}")


def _print_available_urls() -> None:
    """Imprime las URLs disponibles de la aplicacion."""
    access_host = "localhost" if settings.HOST == "0.0.0.0" else settings.HOST
    base_url = f"http://{access_host}:{settings.PORT}"

    logger.opt(colors=True).info("<bold><green>" + "=" * 80 + "</green></bold>")
    logger.opt(colors=True).info("<bold><green>URLS DISPONIBLES:</green></bold>")
    logger.opt(colors=True).info(f"<cyan>  Swagger UI:  {base_url}/docs</cyan>")
    logger.opt(colors=True).info(f"<cyan>  API:         {base_url}/api/v1</cyan>")
    logger.opt(colors=True).info(f"<cyan>  Health:      {base_url}/health</cyan>")
    logger.opt(colors=True).info("<bold><green>" + "=" * 80 + "</green></bold>")


async def shutdown(app: FastAPI) -> None:
    """Libera recursos al cerrar la aplicacion."""
    logger.info("Cerrando aplicacion...")

    # Esperar envios a la hoja central aun en vuelo
    in_flight = pending_count()
    if in_flight:
        logger.info(f"Esperando {in_flight} envio(s) a la hoja central...")
        await drain_pending()

    close_db()
    logger.info("Conexiones de base de datos cerradas")

    logger.success("Aplicacion cerrada correctamente")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Ciclo de vida de la aplicacion (inicio -> peticiones -> cierre)."""
    await startup(app)
    try:
        yield
    finally:
        await shutdown(app)
