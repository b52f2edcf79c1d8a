from datetime import datetime
from typing import List

from pydantic import BaseModel, Field, field_validator

from medlogic.knowledge import SymptomID


class DiagnoseRequest(BaseModel):
    symptoms: List[SymptomID] = Field(
        default_factory=list,
        description="Síntomas observados (ids del catálogo)"
    )
    
    @field_validator("symptoms", mode="before")
    @classmethod
    def normalize_symptoms(cls, v):
        """Normaliza mayúsculas y espacios antes de validar contra el catálogo."""
        if isinstance(v, list):
            return [s.strip().lower() if isinstance(s, str) else s for s in v]
        return v
    
    model_config = {
        "json_schema_extra": {
            "example": {
                "symptoms": ["fever", "cough", "muscle_ache", "fatigue"]
            }
        }
    }


class ProofInfo(BaseModel):
    rule_id: str = Field(description="Regla ganadora")
    conclusion: str = Field(description="Id de la enfermedad concluida")
    evidence: List[SymptomID] = Field(description="Antecedentes presentes")
    missing: List[SymptomID] = Field(description="Antecedentes ausentes")
    conflicts: List[SymptomID] = Field(description="Exclusiones observadas")
    score: float = Field(ge=0, le=1)


class DiagnosisInfo(BaseModel):
    disease_id: str = Field(description="Id de la enfermedad")
    disease_name: str = Field(description="Nombre visible")
    score: float = Field(ge=0, le=1, description="Confianza (0-1)")
    score_percent: int = Field(ge=0, le=100, description="Confianza en porcentaje")
    explanation: str = Field(description="Justificación de la regla ganadora")
    proof: ProofInfo


class DiagnoseResponse(BaseModel):
    symptoms: List[SymptomID] = Field(description="Conjunto de hechos normalizado")
    diagnoses: List[DiagnosisInfo] = Field(description="Candidatos ordenados por score")
    kb_version: str = Field(description="Versión del catálogo usada")
    timestamp: datetime = Field(description="Timestamp del diagnóstico")
    
    model_config = {
        "json_schema_extra": {
            "example": {
                "symptoms": ["cough", "fatigue", "fever", "muscle_ache"],
                "diagnoses": [
                    {
                        "disease_id": "flu",
                        "disease_name": "Influenza (Flu)",
                        "score": 1.0,
                        "score_percent": 100,
                        "explanation": "Rule R1 fired because you have Fever, Cough, Muscle Ache, Fatigue.",
                        "proof": {
                            "rule_id": "R1",
                            "conclusion": "flu",
                            "evidence": ["fever", "cough", "muscle_ache", "fatigue"],
                            "missing": [],
                            "conflicts": [],
                            "score": 1.0
                        }
                    }
                ],
                "kb_version": "1.2.0",
                "timestamp": "2025-01-15T12:00:00Z"
            }
        }
    }
