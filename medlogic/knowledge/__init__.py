"""Base de conocimiento: catálogos de síntomas, enfermedades y reglas."""

from .models import SymptomID, Symptom, Disease, Rule, KnowledgeBase, parse_symptoms
from .catalog import DEFAULT_KNOWLEDGE_BASE
from .validators import KnowledgeBaseValidator, ValidationResult
from .loader import load_knowledge_base, read_document, knowledge_base_from_dict, knowledge_base_to_dict
from .provider import KnowledgeBaseProvider, get_provider

__all__ = [
    "SymptomID",
    "Symptom",
    "Disease",
    "Rule",
    "KnowledgeBase",
    "parse_symptoms",
    "DEFAULT_KNOWLEDGE_BASE",
    "KnowledgeBaseValidator",
    "ValidationResult",
    "load_knowledge_base",
    "read_document",
    "knowledge_base_from_dict",
    "knowledge_base_to_dict",
    "KnowledgeBaseProvider",
    "get_provider",
]
