"""Validadores de integridad de la base de conocimiento."""

from collections import Counter
from dataclasses import dataclass, field
from typing import List

from .models import KnowledgeBase, SymptomID


@dataclass
class ValidationResult:
    """Resultado de validación."""
    valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    
    def add_error(self, message: str) -> None:
        """Añade un error."""
        self.errors.append(message)
        self.valid = False
    
    def add_warning(self, message: str) -> None:
        """Añade una advertencia."""
        self.warnings.append(message)


class KnowledgeBaseValidator:
    """
    Validador de integridad referencial de un snapshot.
    
    Errores (fatales al cargar):
    - Regla sin antecedentes
    - Exclusiones que contienen todos los antecedentes (regla insatisfacible)
    - Conclusión que no corresponde a ninguna enfermedad
    - Ids duplicados de síntoma, enfermedad o regla
    - Referencias a síntomas fuera del catálogo cerrado
    
    Advertencias:
    - Solapamiento parcial antecedentes/exclusiones (error en modo estricto)
    - Síntomas referenciados sin entrada en el catálogo (sin etiqueta)
    - Enfermedades que ninguna regla concluye
    """
    
    @staticmethod
    def validate(kb: KnowledgeBase, strict: bool = False) -> ValidationResult:
        """
        Valida un snapshot completo.
        
        Args:
            kb: Base de conocimiento a validar
            strict: Si True, el solapamiento parcial es un error
        
        Returns:
            ValidationResult con errores y warnings
        """
        result = ValidationResult()
        
        KnowledgeBaseValidator._check_duplicates(kb, result)
        
        catalogued = {symptom.id for symptom in kb.symptoms}
        concluded = set()
        
        for rule in kb.rules:
            concluded.add(rule.conclusion)
            
            if not rule.antecedents:
                result.add_error(f"Regla {rule.id}: sin antecedentes")
            
            if kb.disease(rule.conclusion) is None:
                result.add_error(
                    f"Regla {rule.id}: conclusión '{rule.conclusion}' no existe en el catálogo"
                )
            
            referenced = list(rule.antecedents) + list(rule.exclusions)
            foreign = [s for s in referenced if not isinstance(s, SymptomID)]
            if foreign:
                result.add_error(
                    f"Regla {rule.id}: síntomas fuera del catálogo cerrado: "
                    + ", ".join(str(s) for s in foreign)
                )
                continue
            
            overlap = set(rule.antecedents) & set(rule.exclusions)
            if rule.antecedents and set(rule.antecedents) <= set(rule.exclusions):
                result.add_error(
                    f"Regla {rule.id}: todas las exclusiones cubren los antecedentes (insatisfacible)"
                )
            elif overlap:
                message = (
                    f"Regla {rule.id}: síntomas requeridos y excluidos a la vez: "
                    + ", ".join(sorted(s.value for s in overlap))
                )
                if strict:
                    result.add_error(message)
                else:
                    result.add_warning(message)
            
            missing_labels = [s for s in dict.fromkeys(referenced) if s not in catalogued]
            if missing_labels:
                result.add_warning(
                    f"Regla {rule.id}: síntomas sin entrada en el catálogo: "
                    + ", ".join(s.value for s in missing_labels)
                )
        
        for disease in kb.diseases:
            if disease.id not in concluded:
                result.add_warning(f"Enfermedad '{disease.id}' no es concluida por ninguna regla")
        
        return result
    
    @staticmethod
    def _check_duplicates(kb: KnowledgeBase, result: ValidationResult) -> None:
        """Detecta ids repetidos en cada catálogo."""
        catalogs = (
            ("síntoma", [s.id.value if isinstance(s.id, SymptomID) else str(s.id) for s in kb.symptoms]),
            ("enfermedad", [d.id for d in kb.diseases]),
            ("regla", [r.id for r in kb.rules]),
        )
        for kind, ids in catalogs:
            duplicates = [item for item, count in Counter(ids).items() if count > 1]
            for item in duplicates:
                result.add_error(f"Id de {kind} duplicado: '{item}'")
