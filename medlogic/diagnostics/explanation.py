"""Síntesis de explicaciones legibles a partir de una prueba."""

from typing import Iterable

from ..knowledge import KnowledgeBase, SymptomID
from ..utils import Config, setup_logger


config = Config()
logger = setup_logger(
    "diagnostics.explanation",
    log_file=config.reports_dir / "diagnostics.log",
    level=config.log_level,
    format_type=config.log_format
)


def _label(symptom, kb: KnowledgeBase) -> str:
    """Etiqueta del síntoma; si no está catalogado se usa el id crudo."""
    label = kb.symptom_label(symptom)
    if label is None:
        raw = symptom.value if isinstance(symptom, SymptomID) else str(symptom)
        logger.debug(f"Síntoma sin etiqueta en el catálogo: {raw}")
        return raw
    return label


def _join(symptoms: Iterable, kb: KnowledgeBase) -> str:
    return ", ".join(_label(s, kb) for s in symptoms)


def generate_explanation(proof, disease_name: str, kb: KnowledgeBase) -> str:
    """
    Genera la justificación de una prueba.
    
    Orden fijo de las frases:
    1. Regla disparada y evidencia
    2. Síntomas típicos ausentes (si hay)
    3. Advertencia por síntomas en conflicto (si hay)
    
    Args:
        proof: Prueba ganadora de la enfermedad
        disease_name: Nombre visible de la enfermedad
        kb: Base de conocimiento para resolver etiquetas
    
    Returns:
        Texto con las frases separadas por un espacio
    """
    sentences = [
        f"Rule {proof.rule_id} fired because you have {_join(proof.evidence, kb)}."
    ]
    
    if proof.missing:
        sentences.append(
            f"However, typical symptoms like {_join(proof.missing, kb)} are missing."
        )
    
    if proof.conflicts:
        sentences.append(
            f"Warning: {_join(proof.conflicts, kb)} are usually NOT associated with "
            f"{disease_name}, which lowers confidence."
        )
    
    return " ".join(sentences)
