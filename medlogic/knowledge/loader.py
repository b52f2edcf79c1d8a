"""Carga y validación de la base de conocimiento."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..exceptions import DataIntegrityError
from ..utils import Config, setup_logger
from .catalog import DEFAULT_KNOWLEDGE_BASE
from .models import Disease, KnowledgeBase, Rule, Symptom, SymptomID
from .validators import KnowledgeBaseValidator


config = Config()
logger = setup_logger(
    "knowledge.loader",
    log_file=config.reports_dir / "knowledge.log",
    level=config.log_level,
    format_type=config.log_format
)


def load_knowledge_base(
    path: Optional[Union[str, Path]] = None,
    strict: Optional[bool] = None
) -> KnowledgeBase:
    """
    Construye un snapshot validado de la base de conocimiento.
    
    Args:
        path: Archivo JSON. Si None, se usa el catálogo integrado
        strict: Rechazar solapamientos parciales. Default: config.kb_strict
    
    Returns:
        KnowledgeBase inmutable
    
    Raises:
        DataIntegrityError: Si el documento es ilegible o inconsistente
    """
    if strict is None:
        strict = config.kb_strict
    
    if path is None:
        kb = DEFAULT_KNOWLEDGE_BASE
        source = "catálogo integrado"
    else:
        path = Path(path)
        kb = knowledge_base_from_dict(read_document(path))
        source = str(path)
    
    result = KnowledgeBaseValidator.validate(kb, strict=strict)
    
    for warning in result.warnings:
        logger.warning(f"Base de conocimiento ({source}): {warning}")
    
    if not result.valid:
        for error in result.errors:
            logger.error(f"Base de conocimiento ({source}): {error}")
        raise DataIntegrityError(
            f"Base de conocimiento inválida ({source})", result.errors
        )
    
    logger.info(
        f"Base de conocimiento cargada desde {source}: v{kb.version}, "
        f"{len(kb.rules)} reglas, {len(kb.diseases)} enfermedades"
    )
    return kb


def read_document(path: Path) -> Dict[str, Any]:
    """Lee el JSON crudo."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            document = json.load(f)
    except OSError as e:
        raise DataIntegrityError(f"No se pudo leer {path}", [str(e)]) from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DataIntegrityError(f"JSON inválido en {path}", [str(e)]) from e
    
    if not isinstance(document, dict):
        raise DataIntegrityError(f"JSON inválido en {path}", ["se esperaba un objeto"])
    
    return document


def knowledge_base_from_dict(document: Dict[str, Any]) -> KnowledgeBase:
    """
    Convierte un documento (formato de exportación JSON) en KnowledgeBase.
    
    No valida integridad referencial; solo forma y tipos.
    """
    problems: List[str] = []
    
    sections = {}
    for key in ("symptoms", "diseases", "rules"):
        section = document.get(key, [])
        if not isinstance(section, list):
            problems.append(f"{key}: se esperaba una lista, no {type(section).__name__}")
            section = []
        sections[key] = section
    
    symptoms = []
    for i, item in enumerate(sections["symptoms"]):
        try:
            symptoms.append(Symptom(
                id=SymptomID(item["id"]),
                label=str(item["label"]),
                synonyms=tuple(str(s) for s in item.get("synonyms", [])),
            ))
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            problems.append(f"symptoms[{i}]: entrada inválida ({e!r})")
    
    diseases = []
    for i, item in enumerate(sections["diseases"]):
        try:
            diseases.append(Disease(
                id=str(item["id"]),
                name=str(item["name"]),
                description=str(item.get("description", "")),
            ))
        except (KeyError, TypeError, AttributeError) as e:
            problems.append(f"diseases[{i}]: entrada inválida ({e!r})")
    
    rules = []
    for i, item in enumerate(sections["rules"]):
        try:
            rules.append(Rule(
                id=str(item["id"]),
                conclusion=str(item["conclusion"]),
                antecedents=tuple(SymptomID(s) for s in item["antecedents"]),
                exclusions=tuple(SymptomID(s) for s in item.get("exclusions") or []),
                priority=int(item.get("priority", 0)),
                description=str(item.get("description") or ""),
            ))
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            problems.append(f"rules[{i}]: entrada inválida ({e!r})")
    
    if problems:
        raise DataIntegrityError("Documento de base de conocimiento mal formado", problems)
    
    return KnowledgeBase(
        version=str(document.get("version", "0.0.0")),
        last_updated=str(document.get("lastUpdated", "")),
        symptoms=tuple(symptoms),
        diseases=tuple(diseases),
        rules=tuple(rules),
    )


def knowledge_base_to_dict(kb: KnowledgeBase) -> Dict[str, Any]:
    """Serializa el snapshot al mismo formato que acepta el loader."""
    return {
        "version": kb.version,
        "lastUpdated": kb.last_updated,
        "symptoms": [
            {"id": s.id.value, "label": s.label, "synonyms": list(s.synonyms)}
            for s in kb.symptoms
        ],
        "diseases": [
            {"id": d.id, "name": d.name, "description": d.description}
            for d in kb.diseases
        ],
        "rules": [
            {
                "id": r.id,
                "conclusion": r.conclusion,
                "antecedents": [s.value for s in r.antecedents],
                "exclusions": [s.value for s in r.exclusions],
                "priority": r.priority,
                "description": r.description,
            }
            for r in kb.rules
        ],
    }
