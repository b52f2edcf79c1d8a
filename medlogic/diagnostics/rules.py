"""Motor de inferencia basado en reglas diagnósticas ponderadas."""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from ..exceptions import DomainError
from ..knowledge import KnowledgeBase, Rule, SymptomID, get_provider
from ..utils import Config, setup_logger
from .explanation import generate_explanation


config = Config()
logger = setup_logger(
    "diagnostics.rules",
    log_file=config.reports_dir / "diagnostics.log",
    level=config.log_level,
    format_type=config.log_format
)

# Cada exclusión observada multiplica el score por este factor
DECAY_FACTOR = 0.1

# Solo se aceptan pruebas con score estrictamente mayor
ACCEPTANCE_THRESHOLD = 0.2


@dataclass(frozen=True)
class Proof:
    """Evaluación de una regla contra un conjunto de hechos."""
    rule_id: str
    conclusion: str
    evidence: tuple
    missing: tuple
    conflicts: tuple
    score: float
    
    def to_dict(self) -> Dict:
        return {
            "rule_id": self.rule_id,
            "conclusion": self.conclusion,
            "evidence": [_value(s) for s in self.evidence],
            "missing": [_value(s) for s in self.missing],
            "conflicts": [_value(s) for s in self.conflicts],
            "score": self.score,
        }


@dataclass(frozen=True)
class DiagnosisResult:
    """Enfermedad candidata con su mejor prueba y explicación."""
    disease_id: str
    disease_name: str
    score: float
    explanation: str
    proof: Proof
    
    @property
    def score_percent(self) -> int:
        """Score como porcentaje entero."""
        return round(self.score * 100)
    
    def to_dict(self) -> Dict:
        return {
            "disease_id": self.disease_id,
            "disease_name": self.disease_name,
            "score": self.score,
            "explanation": self.explanation,
            "proof": self.proof.to_dict(),
        }


def _value(symptom) -> str:
    return symptom.value if isinstance(symptom, SymptomID) else str(symptom)


def match_rule(rule: Rule, facts: Iterable) -> Proof:
    """
    Evalúa una regla contra los hechos observados.
    
    score = |evidencia| / |antecedentes| * DECAY_FACTOR ** |conflictos|
    
    Args:
        rule: Regla a evaluar
        facts: Identificadores de síntomas observados
    
    Returns:
        Proof con evidencia, faltantes, conflictos y score
    
    Raises:
        DomainError: Si la regla no tiene antecedentes
    """
    if not rule.antecedents:
        raise DomainError(f"Regla {rule.id} sin antecedentes")
    
    if not isinstance(facts, (set, frozenset)):
        facts = frozenset(facts)
    
    evidence = tuple(s for s in rule.antecedents if s in facts)
    missing = tuple(s for s in rule.antecedents if s not in facts)
    conflicts = tuple(s for s in rule.exclusions if s in facts)
    
    raw_score = len(evidence) / len(rule.antecedents)
    score = raw_score * (DECAY_FACTOR ** len(conflicts))
    
    return Proof(
        rule_id=rule.id,
        conclusion=rule.conclusion,
        evidence=evidence,
        missing=missing,
        conflicts=conflicts,
        score=score,
    )


def rank_results(results: Iterable[DiagnosisResult]) -> List[DiagnosisResult]:
    """Orden estable por score descendente; los empates conservan el orden de llegada."""
    return sorted(results, key=lambda r: r.score, reverse=True)


class InferenceEngine:
    """
    Motor de encadenamiento hacia adelante sobre un snapshot inmutable.
    
    Flujo por llamada:
    1. Evaluar cada regla en orden de declaración (match_rule)
    2. Descartar pruebas con score <= ACCEPTANCE_THRESHOLD
    3. Por enfermedad, conservar la prueba de score estrictamente mayor
       (en empate gana la primera regla declarada)
    4. Adjuntar la explicación de la prueba ganadora
    5. Ordenar por score descendente
    
    No guarda estado entre llamadas; es seguro invocarlo en paralelo.
    """
    
    def __init__(self, knowledge_base: KnowledgeBase):
        self.knowledge_base = knowledge_base
    
    def evaluate_all(self, symptoms: Iterable) -> List[Proof]:
        """Pruebas de todas las reglas (incluidas las descartadas), en orden de declaración."""
        facts = frozenset(symptoms)
        return [match_rule(rule, facts) for rule in self.knowledge_base.rules]
    
    def aggregate(self, symptoms: Iterable) -> List[DiagnosisResult]:
        """
        Mejor prueba por enfermedad, sin ordenar por score.
        
        Args:
            symptoms: Conjunto de hechos
        
        Returns:
            Lista de DiagnosisResult en orden de primera aparición
        """
        kb = self.knowledge_base
        best: Dict[str, Proof] = {}
        
        for proof in self.evaluate_all(symptoms):
            if proof.score <= ACCEPTANCE_THRESHOLD:
                continue
            if kb.disease(proof.conclusion) is None:
                # El loader rechaza estas reglas; aquí solo se ignoran
                continue
            current = best.get(proof.conclusion)
            if current is None or proof.score > current.score:
                best[proof.conclusion] = proof
        
        results = []
        for disease_id, proof in best.items():
            disease = kb.disease(disease_id)
            results.append(DiagnosisResult(
                disease_id=disease.id,
                disease_name=disease.name,
                score=proof.score,
                explanation=generate_explanation(proof, disease.name, kb),
                proof=proof,
            ))
        return results
    
    def infer(self, symptoms: Iterable) -> List[DiagnosisResult]:
        """
        Diagnósticos candidatos ordenados para un conjunto de hechos.
        
        Identificadores desconocidos nunca coinciden y se ignoran.
        """
        facts = frozenset(symptoms)
        results = rank_results(self.aggregate(facts))
        
        logger.debug(
            f"Inferencia: {len(facts)} hechos, {len(results)} diagnósticos",
            extra={"extra_data": {
                "facts": sorted(_value(s) for s in facts),
                "diagnoses": [r.disease_id for r in results],
            }}
        )
        return results


def infer(
    symptoms: Iterable,
    knowledge_base: Optional[KnowledgeBase] = None
) -> List[DiagnosisResult]:
    """Atajo sobre el snapshot vigente del proceso."""
    if knowledge_base is None:
        knowledge_base = get_provider().snapshot
    return InferenceEngine(knowledge_base).infer(symptoms)
