import logging

from medlogic.diagnostics import Proof, generate_explanation
from medlogic.knowledge import Symptom, SymptomID as S


def test_evidence_only(kb):
    proof = Proof("R1", "flu", (S.FEVER, S.COUGH, S.MUSCLE_ACHE, S.FATIGUE), (), (), 1.0)

    text = generate_explanation(proof, "Influenza (Flu)", kb)

    assert text == "Rule R1 fired because you have Fever, Cough, Muscle Ache, Fatigue."


def test_missing_clause(kb):
    proof = Proof("R7", "flu", (S.HEADACHE, S.FATIGUE), (S.FEVER,), (), 2 / 3)

    text = generate_explanation(proof, "Influenza (Flu)", kb)

    assert text == (
        "Rule R7 fired because you have Headache, Fatigue. "
        "However, typical symptoms like Fever are missing."
    )


def test_conflict_clause_names_disease(kb):
    proof = Proof("R2", "cold", (S.RUNNY_NOSE, S.SORE_THROAT, S.SNEEZING), (), (S.FEVER,), 0.1)

    text = generate_explanation(proof, "Common Cold", kb)

    assert text == (
        "Rule R2 fired because you have Runny Nose, Sore Throat, Sneezing. "
        "Warning: Fever are usually NOT associated with Common Cold, which lowers confidence."
    )


def test_clause_order_is_fixed(kb):
    proof = Proof("R3", "allergies", (S.SNEEZING,), (S.ITCHY_EYES, S.RUNNY_NOSE), (S.FEVER,), 1 / 30)

    text = generate_explanation(proof, "Seasonal Allergies", kb)

    fired = text.index("fired because")
    however = text.index("However")
    warning = text.index("Warning")
    assert fired < however < warning
    assert "Itchy Eyes, Runny Nose" in text
    assert not text.endswith(" ")


def test_missing_label_falls_back_to_raw_identifier(kb_factory, rule_factory, caplog):
    symptoms = [Symptom(S.HEADACHE, "Headache")]
    kb = kb_factory([rule_factory("R4", "migraine", [S.HEADACHE, S.NAUSEA])], symptoms=symptoms)
    proof = Proof("R4", "migraine", (S.HEADACHE,), (S.NAUSEA,), (), 0.5)

    with caplog.at_level(logging.DEBUG, logger="diagnostics.explanation"):
        text = generate_explanation(proof, "Migraine", kb)

    assert text == (
        "Rule R4 fired because you have Headache. "
        "However, typical symptoms like nausea are missing."
    )
    assert [r.levelname for r in caplog.records if "nausea" in r.getMessage()] == ["DEBUG"]
