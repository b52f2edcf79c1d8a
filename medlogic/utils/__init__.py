"""Utilidades del proyecto."""

from .config import Config
from .logging import JsonFormatter, setup_logger

__all__ = ["Config", "JsonFormatter", "setup_logger"]
