"""Tipos de la base de conocimiento médica."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Tuple

from ..exceptions import UnknownSymptomError


class SymptomID(str, Enum):
    """Catálogo cerrado de identificadores de síntoma."""
    FEVER = "fever"
    COUGH = "cough"
    HEADACHE = "headache"
    RUNNY_NOSE = "runny_nose"
    SORE_THROAT = "sore_throat"
    FATIGUE = "fatigue"
    MUSCLE_ACHE = "muscle_ache"
    SNEEZING = "sneezing"
    ITCHY_EYES = "itchy_eyes"
    NAUSEA = "nausea"
    LIGHT_SENSITIVITY = "light_sensitivity"
    STIFF_NECK = "stiff_neck"
    SHORTNESS_BREATH = "shortness_breath"
    CHEST_PAIN = "chest_pain"


def parse_symptoms(values: Iterable) -> FrozenSet[SymptomID]:
    """
    Convierte valores crudos en un conjunto de hechos.
    
    Args:
        values: Identificadores (SymptomID o strings, sin distinguir mayúsculas)
    
    Returns:
        frozenset de SymptomID
    
    Raises:
        UnknownSymptomError: Si algún valor no pertenece al catálogo
    """
    facts = set()
    unknown = []
    
    for value in values:
        if isinstance(value, SymptomID):
            facts.add(value)
            continue
        try:
            facts.add(SymptomID(str(value).strip().lower()))
        except ValueError:
            unknown.append(str(value))
    
    if unknown:
        raise UnknownSymptomError(unknown)
    
    return frozenset(facts)


@dataclass(frozen=True)
class Symptom:
    """Síntoma del catálogo. Los sinónimos son solo metadata de presentación."""
    id: SymptomID
    label: str
    synonyms: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Disease:
    """Enfermedad candidata."""
    id: str
    name: str
    description: str = ""


@dataclass(frozen=True)
class Rule:
    """
    Regla diagnóstica ponderada.
    
    `priority` se conserva para visualización; no interviene en el score.
    """
    id: str
    conclusion: str
    antecedents: Tuple[SymptomID, ...]
    exclusions: Tuple[SymptomID, ...] = ()
    priority: int = 0
    description: str = ""


@dataclass(frozen=True)
class KnowledgeBase:
    """Snapshot inmutable de síntomas, enfermedades y reglas."""
    version: str
    last_updated: str
    symptoms: Tuple[Symptom, ...]
    diseases: Tuple[Disease, ...]
    rules: Tuple[Rule, ...]
    _symptoms_by_id: Mapping[SymptomID, Symptom] = field(
        init=False, repr=False, compare=False
    )
    _diseases_by_id: Mapping[str, Disease] = field(
        init=False, repr=False, compare=False
    )
    
    def __post_init__(self):
        # Se conserva la primera aparición; los duplicados los reporta el validador
        symptoms: Dict[SymptomID, Symptom] = {}
        for symptom in self.symptoms:
            symptoms.setdefault(symptom.id, symptom)
        diseases: Dict[str, Disease] = {}
        for disease in self.diseases:
            diseases.setdefault(disease.id, disease)
        
        object.__setattr__(self, "_symptoms_by_id", MappingProxyType(symptoms))
        object.__setattr__(self, "_diseases_by_id", MappingProxyType(diseases))
    
    def symptom(self, symptom_id) -> Optional[Symptom]:
        return self._symptoms_by_id.get(symptom_id)
    
    def symptom_label(self, symptom_id) -> Optional[str]:
        """Retorna la etiqueta visible del síntoma, o None si no está catalogado."""
        symptom = self._symptoms_by_id.get(symptom_id)
        return symptom.label if symptom is not None else None
    
    def disease(self, disease_id: str) -> Optional[Disease]:
        return self._diseases_by_id.get(disease_id)
    
    def summary(self) -> Dict:
        """Resumen de metadata y tamaños del catálogo."""
        return {
            "version": self.version,
            "last_updated": self.last_updated,
            "n_symptoms": len(self.symptoms),
            "n_diseases": len(self.diseases),
            "n_rules": len(self.rules),
        }
