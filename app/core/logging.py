import logging
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import Optional

from medlogic.utils import JsonFormatter

from .config import get_settings

request_id_context: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s{request_id} - %(message)s"


class JSONFormatter(JsonFormatter):
    def to_dict(self, record: logging.LogRecord) -> dict:
        log_data = super().to_dict(record)
        
        # Añadir request-id si existe
        request_id = request_id_context.get()
        if request_id:
            log_data["request_id"] = request_id
        
        return log_data


class TextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        request_id = request_id_context.get()
        request_id_str = f" [{request_id}]" if request_id else ""
        
        return logging.Formatter(TEXT_FORMAT.format(request_id=request_id_str)).format(record)


def _make_formatter(log_format: str) -> logging.Formatter:
    return JSONFormatter() if log_format == "json" else TextFormatter()


def setup_logging(
    log_level: str = "INFO",
    log_format: str = "json",
    log_file: Optional[Path] = None
) -> None:
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(getattr(logging, log_level.upper()))
    
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(_make_formatter(log_format))
    root_logger.addHandler(console_handler)
    
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(_make_formatter(log_format))
        root_logger.addHandler(file_handler)
    
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:

    return logging.getLogger(name)


settings = get_settings()
setup_logging(
    log_level=settings.log_level,
    log_format=settings.log_format,
    log_file=settings.log_full_path
)
