from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from medlogic.knowledge import SymptomID


class SymptomInfo(BaseModel):
    id: SymptomID = Field(description="Identificador del síntoma")
    label: str = Field(description="Etiqueta visible")
    synonyms: List[str] = Field(default_factory=list, description="Sinónimos (solo presentación)")


class DiseaseInfo(BaseModel):
    id: str = Field(description="Identificador de la enfermedad")
    name: str = Field(description="Nombre visible")
    description: str = Field(default="", description="Descripción")


class RuleInfo(BaseModel):
    id: str = Field(description="Identificador de la regla")
    conclusion: str = Field(description="Id de la enfermedad concluida")
    antecedents: List[SymptomID] = Field(description="Síntomas requeridos")
    exclusions: List[SymptomID] = Field(default_factory=list, description="Síntomas que contradicen la conclusión")
    priority: int = Field(description="Prioridad informativa (no interviene en el score)")
    description: str = Field(default="", description="Descripción clínica")


class KnowledgeBaseInfo(BaseModel):
    version: str = Field(description="Versión del catálogo")
    last_updated: str = Field(description="Fecha de última actualización")
    n_symptoms: int = Field(ge=0)
    n_diseases: int = Field(ge=0)
    n_rules: int = Field(ge=0)
    loaded_at: Optional[datetime] = Field(default=None, description="Timestamp de publicación del snapshot")
    source: str = Field(description="Origen: archivo JSON o catálogo integrado")
