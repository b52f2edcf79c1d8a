"""Catálogo médico integrado (versión 1.2.0)."""

from .models import Disease, KnowledgeBase, Rule, Symptom, SymptomID as S


SYMPTOMS = (
    Symptom(S.FEVER, "Fever", ("high temperature", "feverish", "chills", "pyrexia")),
    Symptom(S.COUGH, "Cough", ("coughing", "dry cough", "wet cough", "hacking")),
    Symptom(S.HEADACHE, "Headache", ("head pain", "migraine", "throbbing head")),
    Symptom(S.RUNNY_NOSE, "Runny Nose", ("rhinorrhea", "nasal congestion", "stuffy nose")),
    Symptom(S.SORE_THROAT, "Sore Throat", ("painful swallowing", "scratchy throat", "pharyngitis")),
    Symptom(S.FATIGUE, "Fatigue", ("tiredness", "exhaustion", "lethargy", "weakness")),
    Symptom(S.MUSCLE_ACHE, "Muscle Ache", ("body aches", "myalgia", "sore muscles")),
    Symptom(S.SNEEZING, "Sneezing", ("sternutation", "constant sneezing")),
    Symptom(S.ITCHY_EYES, "Itchy Eyes", ("watery eyes", "red eyes", "ocular itching")),
    Symptom(S.NAUSEA, "Nausea", ("feeling sick", "queasiness", "vomiting")),
    Symptom(S.LIGHT_SENSITIVITY, "Light Sensitivity", ("photophobia", "hurts to look at light")),
    Symptom(S.STIFF_NECK, "Stiff Neck", ("neck pain", "limited neck movement")),
    Symptom(S.SHORTNESS_BREATH, "Shortness of Breath", ("dyspnea", "difficulty breathing")),
    Symptom(S.CHEST_PAIN, "Chest Pain", ("angina", "tightness in chest")),
)

DISEASES = (
    Disease("flu", "Influenza (Flu)", "A common viral infection that can be deadly, especially in high-risk groups."),
    Disease("cold", "Common Cold", "A viral infection of your nose and throat."),
    Disease("allergies", "Seasonal Allergies", "Immune system reaction to pollen, pets, or other substances."),
    Disease("migraine", "Migraine", "A headache that can cause severe throbbing pain or a pulsing sensation."),
    Disease("meningitis", "Meningitis (Urgent)", "Inflammation of the brain and spinal cord membranes, typically caused by an infection."),
    Disease("covid19", "COVID-19", "A disease caused by a new coronavirus called SARS-CoV-2."),
    Disease("pneumonia", "Pneumonia", "An infection that inflames one or both lungs."),
    Disease("bronchitis", "Bronchitis", "Inflammation of the bronchial tubes."),
    Disease("strep_throat", "Strep Throat", "Bacterial infection causing sore throat."),
    Disease("asthma", "Asthma", "Condition causing airway narrowing and swelling."),
    Disease("sinusitis", "Sinusitis", "Inflammation of sinus lining."),
    Disease("tension_headache", "Tension Headache", "Mild pain felt as a tight band around the head."),
)

# R9 fue retirada del catálogo; los ids restantes se mantienen estables
RULES = (
    Rule("R1", "flu", (S.FEVER, S.COUGH, S.MUSCLE_ACHE, S.FATIGUE), (), 10,
         "Classic flu presentation with systemic body aches and respiratory symptoms."),
    Rule("R2", "cold", (S.RUNNY_NOSE, S.SORE_THROAT, S.SNEEZING), (S.FEVER,), 5,
         "Typical upper respiratory infection without significant fever."),
    Rule("R3", "allergies", (S.ITCHY_EYES, S.SNEEZING, S.RUNNY_NOSE), (S.FEVER,), 8,
         "Histamine response characterized by ocular itching and sneezing."),
    Rule("R4", "migraine", (S.HEADACHE, S.NAUSEA, S.LIGHT_SENSITIVITY), (), 7,
         "Neurological headache involving sensory sensitivity and nausea."),
    Rule("R5", "meningitis", (S.FEVER, S.HEADACHE, S.STIFF_NECK), (), 20,
         "Urgent bacterial/viral indicator with meningeal irritation triad."),
    Rule("R6", "covid19", (S.FEVER, S.COUGH, S.SHORTNESS_BREATH), (), 15,
         "Lower respiratory infection with fever and shortness of breath."),
    Rule("R7", "flu", (S.FEVER, S.HEADACHE, S.FATIGUE), (), 9,
         "Systemic viral prodrome with high fever and fatigue."),
    Rule("R8", "pneumonia", (S.FEVER, S.COUGH, S.SHORTNESS_BREATH, S.CHEST_PAIN), (), 18,
         "Acute pulmonary consolidation indicators."),
    Rule("R10", "bronchitis", (S.COUGH, S.FATIGUE, S.SHORTNESS_BREATH), (), 11,
         "Inflammation of bronchial pathways causing persistent cough."),
    Rule("R11", "strep_throat", (S.SORE_THROAT, S.FEVER, S.HEADACHE), (S.COUGH,), 14,
         "Bacterial pharyngitis usually lacks a viral-style cough."),
    Rule("R12", "asthma", (S.SHORTNESS_BREATH, S.COUGH, S.CHEST_PAIN), (S.FEVER,), 13,
         "Reactive airway disease without infectious indicators."),
    Rule("R13", "sinusitis", (S.HEADACHE, S.RUNNY_NOSE, S.COUGH), (), 9,
         "Cranial pressure from sinus blockage with post-nasal drip."),
    Rule("R14", "tension_headache", (S.HEADACHE, S.FATIGUE), (S.NAUSEA,), 6,
         "Stress-related headache lacking gastric involvement."),
)

DEFAULT_KNOWLEDGE_BASE = KnowledgeBase(
    version="1.2.0",
    last_updated="2024-05-20",
    symptoms=SYMPTOMS,
    diseases=DISEASES,
    rules=RULES,
)
