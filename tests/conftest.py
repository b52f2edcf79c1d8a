import json

import pytest

from medlogic.diagnostics import InferenceEngine
from medlogic.knowledge import (
    DEFAULT_KNOWLEDGE_BASE,
    Disease,
    KnowledgeBase,
    Rule,
    Symptom,
    SymptomID,
)


def make_kb(rules, diseases=None, symptoms=None, version="test"):
    """Snapshot sin validar para ejercitar el motor con reglas arbitrarias."""
    if diseases is None:
        diseases = sorted({r.conclusion for r in rules})
        diseases = [Disease(d, d.title()) for d in diseases]
    if symptoms is None:
        symptoms = [Symptom(s, s.value.replace("_", " ").title()) for s in SymptomID]
    return KnowledgeBase(
        version=version,
        last_updated="2025-01-01",
        symptoms=tuple(symptoms),
        diseases=tuple(diseases),
        rules=tuple(rules),
    )


@pytest.fixture
def kb():
    return DEFAULT_KNOWLEDGE_BASE


@pytest.fixture
def engine(kb):
    return InferenceEngine(kb)


@pytest.fixture
def kb_factory():
    return make_kb


@pytest.fixture
def rule_factory():
    def build(rule_id, conclusion, antecedents, exclusions=(), priority=0):
        return Rule(rule_id, conclusion, tuple(antecedents), tuple(exclusions), priority)
    return build


@pytest.fixture
def kb_file(tmp_path):
    def write(document, name="kb.json"):
        path = tmp_path / name
        if isinstance(document, str):
            path.write_text(document, encoding="utf-8")
        else:
            path.write_text(json.dumps(document), encoding="utf-8")
        return path
    return write
