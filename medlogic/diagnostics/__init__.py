"""Módulo de inferencia diagnóstica y explicaciones."""

from .rules import (
    ACCEPTANCE_THRESHOLD,
    DECAY_FACTOR,
    DiagnosisResult,
    InferenceEngine,
    Proof,
    infer,
    match_rule,
    rank_results,
)
from .explanation import generate_explanation

__all__ = [
    "ACCEPTANCE_THRESHOLD",
    "DECAY_FACTOR",
    "DiagnosisResult",
    "InferenceEngine",
    "Proof",
    "infer",
    "match_rule",
    "rank_results",
    "generate_explanation",
]
