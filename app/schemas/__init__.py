"""Schemas Pydantic v2 para request/response."""

from .health import HealthResponse, KnowledgeBaseStatus, MetricsResponse
from .knowledge import SymptomInfo, DiseaseInfo, RuleInfo, KnowledgeBaseInfo
from .diagnosis import DiagnoseRequest, DiagnoseResponse, DiagnosisInfo, ProofInfo

__all__ = [
    "HealthResponse",
    "KnowledgeBaseStatus",
    "MetricsResponse",
    "SymptomInfo",
    "DiseaseInfo",
    "RuleInfo",
    "KnowledgeBaseInfo",
    "DiagnoseRequest",
    "DiagnoseResponse",
    "DiagnosisInfo",
    "ProofInfo",
]
