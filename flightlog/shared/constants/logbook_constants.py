"""
Constantes del logbook de vuelo.
Define tipos de vuelo, estados de validacion, calificaciones textuales,
modulos del curso y el listado fijo de alumnos e instructores.
"""
from enum import Enum


class FlightType(str, Enum):
    """Tipos de sesion de vuelo."""
    REAL = "Real"
    SIMULATOR = "Simulador"
    TRAINER = "Entrenador"


class ValidationStatus(str, Enum):
    """Estados del ciclo de validacion de un vuelo."""
    PENDING = "pending"
    VALIDATED = "validated"
    REJECTED = "rejected"


class GradeLabel(str, Enum):
    """Calificaciones textuales admitidas junto a la nota numerica 0-10."""
    APTO = "APTO"
    NO_APTO = "NO APTO"
    NO_EVALUABLE = "NO EVALUABLE"


# Codigo de la columna "REAL / SIM" de la hoja
FLIGHT_TYPE_CODES = {
    "R": FlightType.REAL,
    "S": FlightType.SIMULATOR,
    "E": FlightType.TRAINER,
}

# Matriculas que corresponden a simuladores (se exportan siempre como "S")
SIMULATOR_REGISTRATIONS = frozenset({"ET-105", "ET-106"})

# Duracion maxima aceptada para una sesion (horas decimales)
MAX_SESSION_HOURS = 24

# Modulos del curso: codigo -> sesiones requeridas
CURRICULUM_MODULES = {
    "VBAS": 12,
    "VRAD": 20,
    "VPRA": 16,
}

CURRICULUM_LABELS = {
    "VBAS": "Básico (VBAS)",
    "VRAD": "Radio (VRAD)",
    "VPRA": "Práctico (VPRA)",
}

# Objetivos de horas del vuelimetro
GOAL_REAL_HOURS = 45
GOAL_SIM_HOURS = 21
GOAL_TOTAL_HOURS = 66

# Nota minima para considerar un vuelo como apto
PASSING_GRADE = 5.0

# Feedback por defecto cuando se rechaza sin motivo
DEFAULT_REJECTION_FEEDBACK = "Sin especificar"

# Valores usados en la validacion masiva por alumno
BULK_VALIDATION_GRADE = GradeLabel.APTO.value
BULK_VALIDATION_REMARKS = "Validación masiva"

INSTRUCTORS = [
    "IZQUIERDO",
    "DRIS",
    "RODRIGUEZ",
    "PRIETO",
    "BENJUMEA",
    "SORIANO",
    "DUEÑAS",
]

# Orden de presentacion de alumnos
STUDENTS = [
    "CUADRADO",
    "DE LAS MORAS",
    "M.PEREZ",
    "GUERRERO",
    "TRUJILLO",
    "ESPINOSA",
    "CARRILLO",
    "COMPTE",
    "S.ALONSO",
    "GAYO",
    "MELLADO",
    "EXPOSITO",
    "PACHON",
]
