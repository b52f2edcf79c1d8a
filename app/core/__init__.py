"""Core components de la API."""

from .config import Settings, get_settings
from .security import verify_api_key, get_current_user
from .logging import setup_logging, get_logger, request_id_context

__all__ = [
    "Settings",
    "get_settings",
    "verify_api_key",
    "get_current_user",
    "setup_logging",
    "get_logger",
    "request_id_context"
]
