"""MedLogic: motor de inferencia diagnóstica basado en reglas."""

__version__ = "1.0.0"
