"""Snapshot compartido de la base de conocimiento con recarga atómica."""

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from ..utils import Config, setup_logger
from .loader import load_knowledge_base
from .models import KnowledgeBase


config = Config()
logger = setup_logger(
    "knowledge.provider",
    log_file=config.reports_dir / "knowledge.log",
    level=config.log_level,
    format_type=config.log_format
)


class KnowledgeBaseProvider:
    """
    Mantiene la referencia al snapshot vigente.
    
    `reload()` construye y valida el nuevo snapshot antes de reemplazar la
    referencia en una sola asignación; las inferencias en curso conservan
    la versión con la que empezaron. Si la carga falla, el snapshot
    anterior sigue vigente.
    """
    
    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        strict: Optional[bool] = None
    ):
        self.path = Path(path) if path is not None else None
        self.strict = strict
        self._snapshot: Optional[KnowledgeBase] = None
        self._loaded_at: Optional[datetime] = None
    
    @property
    def snapshot(self) -> KnowledgeBase:
        """Snapshot vigente (se carga en el primer acceso)."""
        snapshot = self._snapshot
        if snapshot is None:
            snapshot = self.reload()
        return snapshot
    
    @property
    def loaded_at(self) -> Optional[datetime]:
        return self._loaded_at
    
    def reload(self, path: Optional[Union[str, Path]] = None) -> KnowledgeBase:
        """
        Recarga la base de conocimiento.
        
        Args:
            path: Nueva ruta (opcional). Si None, se reutiliza la configurada
        
        Returns:
            El nuevo snapshot
        
        Raises:
            DataIntegrityError: Si el nuevo snapshot es inválido
        """
        target = Path(path) if path is not None else self.path
        snapshot = load_knowledge_base(target, strict=self.strict)
        
        self._snapshot = snapshot
        self._loaded_at = datetime.now(timezone.utc)
        if path is not None:
            self.path = target
        
        logger.info(f"Snapshot publicado: v{snapshot.version}")
        return snapshot


_default_provider: Optional[KnowledgeBaseProvider] = None


def get_provider() -> KnowledgeBaseProvider:
    """Provider del proceso, configurado desde KB_PATH / KB_STRICT."""
    global _default_provider
    if _default_provider is None:
        _default_provider = KnowledgeBaseProvider(config.kb_path, config.kb_strict)
    return _default_provider
