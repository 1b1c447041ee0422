"""
Configuracion central de la aplicacion.
Gestiona variables de entorno y configuraciones globales.
Soporta configuracion dinamica para desarrollo (ENVIRONMENT=development)
y produccion (ENVIRONMENT=production).
"""
import json
from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import Field, computed_field


class Settings(BaseSettings):
    """
    Clase de configuracion de la aplicacion.
    Lee variables de entorno y proporciona valores por defecto.

    Configuracion del logbook:
    - LOGBOOK_ENDPOINT: URL del Web App de Google Apps Script (hoja central)
    - SHEET_TIMEZONE: zona horaria en la que la hoja interpreta las fechas
    - REMOTE_TIMEOUT_S: timeout de red; vacio delega en el transporte
    - DATABASE_URL: almacenamiento local (SQLite por defecto)
    """

    # Configuracion de la aplicacion
    APP_NAME: str = Field(default="Logbook de Vuelo")
    APP_VERSION: str = Field(default="2.0.0")
    DEBUG: bool = Field(default=False)
    ENVIRONMENT: str = Field(default="production")

    # Configuracion del servidor
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=8000)

    # Almacen local de vuelos
    DATABASE_URL: str = Field(default="sqlite:///./data/flightlog.db")

    # Hoja central (Google Apps Script)
    LOGBOOK_ENDPOINT: str = Field(default="")
    SHEET_TIMEZONE: str = Field(default="Europe/Madrid")
    REMOTE_TIMEOUT_S: Optional[float] = Field(default=None)

    # CORS (acepta lista JSON o "*" para todos los origenes)
    CORS_ORIGINS: str = Field(default="*")

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FILE: str = Field(default="logs/app.log")

    @computed_field
    @property
    def is_development(self) -> bool:
        """Indica si el entorno es de desarrollo."""
        return self.ENVIRONMENT.lower() == "development"

    class Config:
        """Configuracion de Pydantic."""
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignorar campos extra del .env


def get_cors_origins(cors_string: str) -> List[str]:
    """
    Parsea la configuracion de CORS.
    Acepta "*" para todos los origenes o una lista JSON.
    """
    if cors_string == "*":
        return ["*"]
    try:
        return json.loads(cors_string)
    except json.JSONDecodeError:
        # Si no es JSON valido, retornar como lista simple
        return [origin.strip() for origin in cors_string.split(",")]


# Instancia global de configuracion
settings = Settings()
