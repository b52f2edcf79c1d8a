"""Gestión de configuración desde .env"""

import os
from pathlib import Path
from typing import Any, Optional
from dotenv import load_dotenv


class Config:
    """Clase para gestionar la configuración del motor de inferencia."""
    
    _instance = None
    
    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance
    
    def __init__(self):
        if self._initialized:
            return
        
        # Cargar .env desde la raíz del proyecto
        project_root = Path(__file__).parent.parent.parent
        env_path = project_root / ".env"
        
        if env_path.exists():
            load_dotenv(env_path)
        else:
            # Cargar ejemplo si no existe .env
            load_dotenv(project_root / "configs" / ".env.example")
        
        self.project_root = project_root
        self._initialized = True
    
    def get(self, key: str, default: Any = None, cast_type: type = str) -> Any:
        """Obtiene una variable de configuración con cast opcional."""
        value = os.getenv(key, default)
        
        if value is None:
            return default
        
        if cast_type == bool:
            if isinstance(value, bool):
                return value
            return str(value).lower() in ("true", "1", "yes")
        
        return str(value)
    
    def get_bool(self, key: str, default: bool = False) -> bool:
        """Obtiene un booleano de configuración."""
        return self.get(key, default, bool)
    
    def get_path(self, key: str, default: str = "") -> Path:
        """Obtiene una ruta de configuración relativa a la raíz del proyecto."""
        value = self.get(key, default)
        path = Path(value)
        if path.is_absolute():
            return path
        return self.project_root / path
    
    # Propiedades de acceso rápido
    @property
    def kb_path(self) -> Optional[Path]:
        """Archivo JSON de base de conocimiento. None = catálogo integrado."""
        value = self.get("KB_PATH", "")
        if not value:
            return None
        return self.get_path("KB_PATH")
    
    @property
    def kb_strict(self) -> bool:
        return self.get_bool("KB_STRICT", False)
    
    @property
    def reports_dir(self) -> Path:
        return self.get_path("REPORTS_DIR", "reports")
    
    @property
    def log_level(self) -> str:
        return self.get("LOG_LEVEL", "INFO")
    
    @property
    def log_format(self) -> str:
        return self.get("LOG_FORMAT", "json")
