"""
Configuración central de la app (fuente única de verdad).
Lee variables de entorno y expone un objeto Settings tipado.
"""
import os
from pydantic import BaseModel, Field


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseModel):
    # STORE_ENABLED=false fuerza modo mock aunque haya Mongo disponible
    STORE_ENABLED: bool = Field(default_factory=lambda: _env_bool("STORE_ENABLED", "true"))
    MONGO_URI: str = Field(default_factory=lambda: os.getenv("MONGO_URI", "mongodb://localhost:27017"))
    MONGO_DB: str  = Field(default_factory=lambda: os.getenv("MONGO_DB", "portfolio"))
    MONGO_TIMEOUT_MS: int = Field(default_factory=lambda: int(os.getenv("MONGO_TIMEOUT_MS", "2000")))
    CORS_ORIGINS: list[str] = Field(default_factory=lambda: os.getenv("CORS_ORIGINS", "*").split(","))
    LOG_LEVEL: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())

settings = Settings()
