"""
Gestion de sesiones de base de datos.

El almacen local trabaja de forma sincrona: cada operacion se ejecuta en el
turno del llamador. SQLite es el medio por defecto.
"""
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from flightlog.core.config import settings


# Base para modelos de SQLAlchemy
Base = declarative_base()


def _create_engine_args(database_url: str) -> dict:
    """
    Construye los argumentos del engine segun el tipo de base de datos.
    SQLite se usa tambien desde el hilo del sync, por eso se desactiva
    check_same_thread; la version en memoria necesita una unica conexion.
    """
    args = {
        "echo": settings.DEBUG,
        "future": True,
    }

    if database_url.startswith("sqlite"):
        args["connect_args"] = {"check_same_thread": False}
        if ":memory:" in database_url or database_url.rstrip("/") == "sqlite:":
            args["poolclass"] = StaticPool
    else:
        args["pool_pre_ping"] = True  # Verifica conexion antes de usar

    return args


def build_engine(database_url: str) -> Engine:
    return create_engine(database_url, **_create_engine_args(database_url))


def build_session_factory(bind: Engine) -> sessionmaker:
    return sessionmaker(
        bind=bind,
        class_=Session,
        expire_on_commit=False,
        autoflush=False,
    )


# Engine de base de datos
engine = build_engine(settings.DATABASE_URL)

# Session factory
SessionLocal = build_session_factory(engine)


def _ensure_sqlite_dir(database_url: str) -> None:
    """Crea el directorio del fichero SQLite si no existe."""
    if not database_url.startswith("sqlite:///") or ":memory:" in database_url:
        return
    db_path = Path(database_url.replace("sqlite:///", "", 1))
    db_path.parent.mkdir(parents=True, exist_ok=True)


def init_db(bind: Engine = None) -> None:
    """Inicializa la base de datos creando todas las tablas."""
    # Registrar modelos en Base.metadata
    from flightlog.infrastructure.database import models  # noqa: F401

    bind = bind or engine
    _ensure_sqlite_dir(str(bind.url))
    Base.metadata.create_all(bind)


def close_db() -> None:
    """Cierra las conexiones de la base de datos."""
    engine.dispose()
