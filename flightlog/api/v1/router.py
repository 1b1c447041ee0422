"""
Router principal de la API v1.
Agrupa todos los endpoints de la version 1.
"""
from fastapi import APIRouter

from flightlog.api.v1.endpoints import flights, logins, stats, students, sync, validations


# Router principal de la API v1
api_router = APIRouter(prefix="/v1")

# Incluir routers de endpoints especificos
api_router.include_router(sync.router)
api_router.include_router(flights.router)
api_router.include_router(validations.router)
api_router.include_router(students.router)
api_router.include_router(stats.router)
api_router.include_router(logins.router)
