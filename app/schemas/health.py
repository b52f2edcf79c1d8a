from datetime import datetime
from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, Field


class KnowledgeBaseStatus(str, Enum):
    LOADED = "loaded"
    NOT_LOADED = "not_loaded"
    ERROR = "error"


class HealthResponse(BaseModel):
    status: str = Field(description="Estado general del servicio")
    timestamp: datetime = Field(description="Timestamp del health check")
    version: str = Field(description="Versión de la API")
    kb_status: KnowledgeBaseStatus = Field(description="Estado de la base de conocimiento")
    kb_version: Optional[str] = Field(default=None, description="Versión del catálogo vigente")
    kb_loaded_at: Optional[datetime] = Field(
        default=None,
        description="Timestamp de publicación del snapshot"
    )
    uptime_seconds: float = Field(description="Tiempo de uptime en segundos")
    
    model_config = {
        "json_schema_extra": {
            "example": {
                "status": "healthy",
                "timestamp": "2025-01-15T10:30:00Z",
                "version": "1.0.0",
                "kb_status": "loaded",
                "kb_version": "1.2.0",
                "kb_loaded_at": "2025-01-15T10:00:00Z",
                "uptime_seconds": 1800.5
            }
        }
    }


class MetricsResponse(BaseModel):
    uptime_seconds: float = Field(description="Tiempo de uptime en segundos")
    total_diagnoses: int = Field(ge=0, description="Diagnósticos atendidos")
    total_reloads: int = Field(ge=0, description="Recargas de la base de conocimiento")
    total_errors: int = Field(ge=0, description="Errores registrados")
    errors_by_type: Dict[str, int] = Field(default_factory=dict)
    diagnoses_by_disease: Dict[str, int] = Field(
        default_factory=dict,
        description="Conteo por candidato principal"
    )
