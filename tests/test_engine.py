import pytest

from medlogic.diagnostics import (
    ACCEPTANCE_THRESHOLD,
    DiagnosisResult,
    InferenceEngine,
    Proof,
    infer,
    rank_results,
)
from medlogic.knowledge import Disease, SymptomID as S


def ids(results):
    return [r.disease_id for r in results]


def test_classic_flu_presentation_ranks_flu_first(engine):
    results = engine.infer({S.FEVER, S.COUGH, S.MUSCLE_ACHE, S.FATIGUE})

    top = results[0]
    assert top.disease_id == "flu"
    assert top.disease_name == "Influenza (Flu)"
    assert top.score == 1.0
    assert top.score_percent == 100
    assert top.proof.rule_id == "R1"
    assert ids(results) == [
        "flu", "covid19", "bronchitis", "pneumonia",
        "tension_headache", "meningitis", "sinusitis",
    ]


def test_cold_with_fever_falls_below_threshold(engine):
    results = engine.infer({S.RUNNY_NOSE, S.SORE_THROAT, S.SNEEZING, S.FEVER})

    assert "cold" not in ids(results)
    assert "allergies" not in ids(results)


def test_tension_headache_outranks_flu(engine):
    results = engine.infer({S.HEADACHE, S.FATIGUE})

    assert ids(results)[:2] == ["tension_headache", "flu"]
    assert results[0].score == 1.0
    assert results[0].proof.rule_id == "R14"
    assert results[1].score == pytest.approx(2 / 3)
    assert results[1].proof.rule_id == "R7"


def test_equal_scores_keep_first_encountered_order(engine):
    results = engine.infer({S.HEADACHE, S.FATIGUE})

    assert ids(results) == [
        "tension_headache", "flu",
        "migraine", "meningitis", "bronchitis", "strep_throat", "sinusitis",
    ]


def test_empty_fact_set_yields_no_results(engine):
    assert engine.infer(set()) == []


def test_unknown_identifiers_are_ignored(engine):
    known = engine.infer({S.HEADACHE, S.FATIGUE})
    noisy = engine.infer({S.HEADACHE, S.FATIGUE, "hiccups", "toothache"})

    assert noisy == known


def test_threshold_excludes_exactly_point_two(kb_factory, rule_factory):
    antecedents = [S.FEVER, S.COUGH, S.HEADACHE, S.FATIGUE, S.NAUSEA]
    kb = kb_factory([rule_factory("R1", "five", antecedents)])
    engine = InferenceEngine(kb)

    assert engine.evaluate_all({S.FEVER})[0].score == ACCEPTANCE_THRESHOLD
    assert engine.infer({S.FEVER}) == []
    assert ids(engine.infer({S.FEVER, S.COUGH})) == ["five"]


def test_best_rule_wins_and_explanation_matches_it(engine):
    results = engine.infer({S.FEVER, S.HEADACHE, S.FATIGUE})
    flu = next(r for r in results if r.disease_id == "flu")

    assert flu.proof.rule_id == "R7"
    assert flu.score == 1.0
    assert flu.explanation.startswith("Rule R7 fired")


def test_tie_keeps_first_rule_in_declaration_order(kb_factory, rule_factory):
    kb = kb_factory([
        rule_factory("A", "same", [S.FEVER, S.COUGH]),
        rule_factory("B", "same", [S.FEVER, S.HEADACHE]),
    ])

    results = InferenceEngine(kb).infer({S.FEVER})

    assert len(results) == 1
    assert results[0].proof.rule_id == "A"


def test_priority_does_not_affect_ranking(kb_factory, rule_factory):
    kb = kb_factory([
        rule_factory("LOW", "first", [S.FEVER, S.COUGH], priority=1),
        rule_factory("HIGH", "second", [S.FEVER, S.HEADACHE], priority=99),
    ])

    assert ids(InferenceEngine(kb).infer({S.FEVER})) == ["first", "second"]


def test_rules_with_unknown_conclusion_are_skipped(kb_factory, rule_factory):
    kb = kb_factory(
        [
            rule_factory("R1", "ghost", [S.FEVER]),
            rule_factory("R2", "real", [S.FEVER]),
        ],
        diseases=[Disease("real", "Real")],
    )

    assert ids(InferenceEngine(kb).infer({S.FEVER})) == ["real"]


def test_output_invariants_hold_for_many_fact_sets(engine):
    symptoms = list(S)
    fact_sets = [set(symptoms[i:i + width]) for width in (1, 2, 3, 5) for i in range(len(symptoms))]
    fact_sets.append(set(symptoms))

    for facts in fact_sets:
        results = engine.infer(facts)
        scores = [r.score for r in results]

        assert all(0.0 <= s <= 1.0 for s in scores)
        assert all(s > ACCEPTANCE_THRESHOLD for s in scores)
        assert scores == sorted(scores, reverse=True)
        assert len(ids(results)) == len(set(ids(results)))


def test_inference_is_idempotent(engine):
    facts = {S.FEVER, S.COUGH, S.SHORTNESS_BREATH, S.CHEST_PAIN, S.FATIGUE}

    assert engine.infer(facts) == engine.infer(set(facts))
    assert [r.explanation for r in engine.infer(facts)] == [r.explanation for r in engine.infer(facts)]


def test_evaluate_all_returns_every_rule_in_order(engine, kb):
    proofs = engine.evaluate_all(set())

    assert [p.rule_id for p in proofs] == [r.id for r in kb.rules]
    assert all(p.score == 0.0 for p in proofs)


def test_aggregate_keeps_first_seen_order(engine):
    results = engine.aggregate({S.HEADACHE, S.FATIGUE})

    assert ids(results)[0] == "flu"
    assert ids(results)[-1] == "tension_headache"


def test_rank_results_is_stable():
    def result(disease_id, score):
        proof = Proof("R", disease_id, (), (), (), score)
        return DiagnosisResult(disease_id, disease_id, score, "", proof)

    ranked = rank_results([result("a", 0.5), result("b", 0.9), result("c", 0.5), result("d", 0.9)])

    assert ids(ranked) == ["b", "d", "a", "c"]


def test_module_level_infer_accepts_explicit_snapshot(kb):
    assert ids(infer({S.HEADACHE, S.FATIGUE}, kb))[0] == "tension_headache"


def test_module_level_infer_uses_process_snapshot():
    assert ids(infer({S.FEVER, S.COUGH, S.MUSCLE_ACHE, S.FATIGUE}))[0] == "flu"


def test_result_to_dict_uses_plain_values(engine):
    data = engine.infer({S.HEADACHE, S.FATIGUE})[0].to_dict()

    assert data["disease_id"] == "tension_headache"
    assert data["proof"]["evidence"] == ["headache", "fatigue"]
    assert data["proof"]["missing"] == []
