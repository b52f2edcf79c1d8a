"""Servicio de métricas de uso."""

import time
from collections import defaultdict
from typing import Dict

from app.core.logging import get_logger

logger = get_logger(__name__)


class MetricsService:
    """Servicio singleton de métricas."""
    
    _instance = None
    
    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance
    
    def __init__(self):
        if self._initialized:
            return
        
        self.start_time = time.time()
        self.total_diagnoses = 0
        self.total_reloads = 0
        self.total_errors = 0
        self.errors_by_type: Dict[str, int] = defaultdict(int)
        self.diagnoses_by_disease: Dict[str, int] = defaultdict(int)
        
        self._initialized = True
        logger.info("MetricsService inicializado")
    
    def record_diagnosis(self, top_disease_id: str = None):
        """Registra un diagnóstico y su candidato principal."""
        self.total_diagnoses += 1
        if top_disease_id:
            self.diagnoses_by_disease[top_disease_id] += 1
    
    def record_reload(self):
        """Registra una recarga de la base de conocimiento."""
        self.total_reloads += 1
    
    def record_error(self, error_type: str):
        """Registra un error."""
        self.total_errors += 1
        self.errors_by_type[error_type] += 1
    
    def get_uptime(self) -> float:
        """Retorna uptime en segundos."""
        return time.time() - self.start_time
    
    def snapshot(self) -> Dict:
        return {
            "uptime_seconds": self.get_uptime(),
            "total_diagnoses": self.total_diagnoses,
            "total_reloads": self.total_reloads,
            "total_errors": self.total_errors,
            "errors_by_type": dict(self.errors_by_type),
            "diagnoses_by_disease": dict(self.diagnoses_by_disease),
        }


def get_metrics_service() -> MetricsService:
    """Factory function para obtener MetricsService singleton."""
    return MetricsService()
