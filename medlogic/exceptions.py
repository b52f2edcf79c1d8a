"""Excepciones del motor de inferencia."""

from typing import Iterable, List, Optional


class MedLogicError(Exception):
    """Excepción base del paquete."""


class DataIntegrityError(MedLogicError):
    """
    Base de conocimiento inconsistente.

    Se detecta al construir el snapshot, nunca durante la inferencia.
    """

    def __init__(self, message: str, problems: Optional[Iterable[str]] = None):
        self.message = message
        self.problems: List[str] = list(problems or [])
        super().__init__(self.message)

    def __str__(self) -> str:
        if not self.problems:
            return self.message
        return f"{self.message}: " + "; ".join(self.problems)


class DomainError(MedLogicError):
    """Precondición del matcher violada (regla sin antecedentes)."""


class UnknownSymptomError(MedLogicError, ValueError):
    """Identificadores de síntoma que no pertenecen al catálogo cerrado."""

    def __init__(self, unknown: Iterable[str]):
        self.unknown: List[str] = list(unknown)
        super().__init__(
            "Síntomas desconocidos: " + ", ".join(repr(u) for u in self.unknown)
        )
