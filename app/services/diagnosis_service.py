"""Servicio de diagnóstico basado en reglas."""

from datetime import datetime
from typing import Iterable, List, Optional

from app.core.config import get_settings
from app.core.exceptions import KnowledgeBaseException, KnowledgeBaseNotLoadedException
from app.core.logging import get_logger
from medlogic.diagnostics import DiagnosisResult, InferenceEngine
from medlogic.exceptions import DataIntegrityError
from medlogic.knowledge import KnowledgeBase, KnowledgeBaseProvider

logger = get_logger(__name__)
settings = get_settings()


class DiagnosisService:
    """Servicio singleton sobre el snapshot vigente de la base de conocimiento."""
    
    _instance = None
    
    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance
    
    def __init__(self):
        if self._initialized:
            return
        
        self._provider = KnowledgeBaseProvider(settings.kb_full_path, settings.kb_strict)
        self._initialized = True
        logger.info("DiagnosisService inicializado")
    
    def load(self) -> KnowledgeBase:
        """
        Carga (o recarga) la base de conocimiento configurada.
        
        Raises:
            KnowledgeBaseException: Si el snapshot nuevo es inválido; el anterior sigue vigente
        """
        try:
            return self._provider.reload()
        except DataIntegrityError as e:
            logger.error(f"Base de conocimiento rechazada: {e}")
            raise KnowledgeBaseException(e.message, e.problems) from e
    
    def is_loaded(self) -> bool:
        return self._provider.loaded_at is not None
    
    def get_loaded_at(self) -> Optional[datetime]:
        return self._provider.loaded_at
    
    @property
    def source(self) -> str:
        path = self._provider.path
        return str(path) if path is not None else "builtin"
    
    @property
    def knowledge_base(self) -> KnowledgeBase:
        """Snapshot vigente; si aún no hay uno se intenta cargar."""
        if not self.is_loaded():
            try:
                self.load()
            except KnowledgeBaseException as e:
                raise KnowledgeBaseNotLoadedException(
                    f"Base de conocimiento no disponible: {e.message}"
                )
        return self._provider.snapshot
    
    def diagnose(
        self,
        symptoms: Iterable,
        knowledge_base: Optional[KnowledgeBase] = None
    ) -> List[DiagnosisResult]:
        """
        Ejecuta la inferencia sobre el snapshot vigente.
        
        Args:
            symptoms: Conjunto de hechos validado en el borde (schemas)
            knowledge_base: Snapshot ya leído por el llamador (opcional)
        
        Returns:
            Lista de DiagnosisResult ordenada por score
        """
        if knowledge_base is None:
            knowledge_base = self.knowledge_base
        results = InferenceEngine(knowledge_base).infer(symptoms)
        
        top = f"{results[0].disease_id} ({results[0].score_percent}%)" if results else "ninguno"
        logger.info(f"Diagnóstico: {len(results)} candidatos, principal: {top}")
        
        return results


def get_diagnosis_service() -> DiagnosisService:
    """Factory function para obtener DiagnosisService singleton."""
    return DiagnosisService()
