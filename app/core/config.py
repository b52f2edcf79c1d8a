from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    api_title: str = "MedLogic Diagnosis API"
    api_version: str = "1.0.0"
    api_description: str = "API de diagnóstico explicable basado en reglas"
    api_prefix: str = "/api/v1"
    debug: bool = Field(default=False)
    
    api_key: str = Field(default="dev-key-change-in-production")
    api_key_header: str = "X-API-Key"
    
    @property
    def project_root(self) -> Path:
        return Path(__file__).parent.parent.parent
    
    kb_path: str = Field(default="", description="JSON de base de conocimiento; vacío = catálogo integrado")
    kb_strict: bool = Field(default=False)
    
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")
    log_file: str = Field(default="reports/api.log")
    
    @property
    def kb_full_path(self) -> Optional[Path]:
        if not self.kb_path:
            return None
        path = Path(self.kb_path)
        return path if path.is_absolute() else self.project_root / path
    
    @property
    def log_full_path(self) -> Path:
        return self.project_root / self.log_file


@lru_cache()
def get_settings() -> Settings:

    return Settings()
