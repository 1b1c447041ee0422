"""
Utilidades de texto para comparar nombres del roster.
"""
import unicodedata
from typing import Iterable, Optional


def normalize_name(name: Optional[str]) -> str:
    """
    Normaliza un nombre para comparaciones: sin tildes, mayusculas y sin
    espacios sobrantes. "Dueñas " y "DUENAS" producen la misma clave.
    """
    if not name:
        return ""
    decomposed = unicodedata.normalize("NFD", name.strip())
    stripped = "".join(c for c in decomposed if unicodedata.category(c) != "Mn")
    return stripped.upper()


def same_person(a: Optional[str], b: Optional[str]) -> bool:
    return normalize_name(a) == normalize_name(b)


def match_roster_name(name: Optional[str], roster: Iterable[str]) -> str:
    """
    Devuelve el nombre canonico del roster que coincide con `name`.
    Si no hay coincidencia se devuelve el nombre tal cual (recortado).
    """
    target = normalize_name(name)
    for candidate in roster:
        if normalize_name(candidate) == target:
            return candidate
    return (name or "").strip()
