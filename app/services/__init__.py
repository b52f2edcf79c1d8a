"""Servicios de la aplicación."""

from .diagnosis_service import DiagnosisService, get_diagnosis_service
from .metrics_service import MetricsService, get_metrics_service

__all__ = ["DiagnosisService", "get_diagnosis_service", "MetricsService", "get_metrics_service"]
