"""Router principal v1 con todos los endpoints."""

from datetime import datetime, timezone
from typing import List

from fastapi import APIRouter, Depends

from app.core.config import get_settings
from app.core.security import verify_api_key, get_current_user
from app.core.exceptions import KnowledgeBaseException
from app.core.logging import get_logger
from app.schemas.health import HealthResponse, KnowledgeBaseStatus, MetricsResponse
from app.schemas.knowledge import SymptomInfo, DiseaseInfo, RuleInfo, KnowledgeBaseInfo
from app.schemas.diagnosis import DiagnoseRequest, DiagnoseResponse, DiagnosisInfo, ProofInfo
from app.services.diagnosis_service import get_diagnosis_service
from app.services.metrics_service import get_metrics_service

logger = get_logger(__name__)
settings = get_settings()
router = APIRouter()

# Instancias de servicios
diagnosis_service = get_diagnosis_service()
metrics_service = get_metrics_service()


def _knowledge_base_info() -> KnowledgeBaseInfo:
    summary = diagnosis_service.knowledge_base.summary()
    return KnowledgeBaseInfo(
        **summary,
        loaded_at=diagnosis_service.get_loaded_at(),
        source=diagnosis_service.source
    )


@router.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """
    Health check endpoint.
    
    Verifica el estado del servicio y de la base de conocimiento.
    """
    loaded = diagnosis_service.is_loaded()
    
    return HealthResponse(
        status="healthy" if loaded else "degraded",
        timestamp=datetime.now(timezone.utc),
        version=settings.api_version,
        kb_status=KnowledgeBaseStatus.LOADED if loaded else KnowledgeBaseStatus.NOT_LOADED,
        kb_version=diagnosis_service.knowledge_base.version if loaded else None,
        kb_loaded_at=diagnosis_service.get_loaded_at(),
        uptime_seconds=metrics_service.get_uptime()
    )


@router.get("/knowledge-base", response_model=KnowledgeBaseInfo, tags=["Knowledge Base"])
async def get_knowledge_base_info(_: dict = Depends(get_current_user)):
    """Metadata y tamaños del catálogo vigente."""
    return _knowledge_base_info()


@router.get("/symptoms", response_model=List[SymptomInfo], tags=["Knowledge Base"])
async def list_symptoms(_: dict = Depends(get_current_user)):
    """Catálogo de síntomas con etiquetas y sinónimos."""
    kb = diagnosis_service.knowledge_base
    return [
        SymptomInfo(id=s.id, label=s.label, synonyms=list(s.synonyms))
        for s in kb.symptoms
    ]


@router.get("/diseases", response_model=List[DiseaseInfo], tags=["Knowledge Base"])
async def list_diseases(_: dict = Depends(get_current_user)):
    """Catálogo de enfermedades."""
    kb = diagnosis_service.knowledge_base
    return [
        DiseaseInfo(id=d.id, name=d.name, description=d.description)
        for d in kb.diseases
    ]


@router.get("/rules", response_model=List[RuleInfo], tags=["Knowledge Base"])
async def list_rules(_: dict = Depends(get_current_user)):
    """Reglas en orden de declaración."""
    kb = diagnosis_service.knowledge_base
    return [
        RuleInfo(
            id=r.id,
            conclusion=r.conclusion,
            antecedents=list(r.antecedents),
            exclusions=list(r.exclusions),
            priority=r.priority,
            description=r.description
        )
        for r in kb.rules
    ]


@router.post("/diagnose", response_model=DiagnoseResponse, tags=["Diagnosis"])
async def diagnose(
    request: DiagnoseRequest,
    _: dict = Depends(get_current_user)
):
    """
    Diagnóstico basado en reglas.
    
    Evalúa el conjunto de síntomas contra todas las reglas y retorna los
    candidatos ordenados por confianza, cada uno con su prueba y explicación.
    Los ids desconocidos se rechazan con 422 al validar el request.
    """
    facts = frozenset(request.symptoms)
    kb = diagnosis_service.knowledge_base
    results = diagnosis_service.diagnose(facts, kb)
    
    metrics_service.record_diagnosis(results[0].disease_id if results else None)
    
    return DiagnoseResponse(
        symptoms=sorted(facts, key=lambda s: s.value),
        diagnoses=[
            DiagnosisInfo(
                disease_id=r.disease_id,
                disease_name=r.disease_name,
                score=r.score,
                score_percent=r.score_percent,
                explanation=r.explanation,
                proof=ProofInfo(
                    rule_id=r.proof.rule_id,
                    conclusion=r.proof.conclusion,
                    evidence=list(r.proof.evidence),
                    missing=list(r.proof.missing),
                    conflicts=list(r.proof.conflicts),
                    score=r.proof.score
                )
            )
            for r in results
        ],
        kb_version=kb.version,
        timestamp=datetime.now(timezone.utc)
    )


@router.get("/metrics", response_model=MetricsResponse, tags=["Metrics"])
async def get_metrics(_: dict = Depends(get_current_user)):
    """Contadores de uso del servicio."""
    return MetricsResponse(**metrics_service.snapshot())


@router.post("/knowledge-base/reload", response_model=KnowledgeBaseInfo, tags=["Knowledge Base"])
async def reload_knowledge_base(api_key: str = Depends(verify_api_key)):
    """
    Recarga la base de conocimiento sin reiniciar el servicio.
    
    El snapshot nuevo se valida completo antes de publicarse; si es
    inválido se responde 422 y el anterior sigue vigente. Requiere API Key.
    """
    logger.info("Recargando base de conocimiento por request de API...")
    try:
        diagnosis_service.load()
    except KnowledgeBaseException:
        metrics_service.record_error("kb_reload_error")
        raise
    
    metrics_service.record_reload()
    return _knowledge_base_info()
