"""
Configuración de logging estructurado.
- Nivel INFO por defecto; DEBUG en desarrollo (LOG_LEVEL).
- Formato con timestamps y nombre del logger.
- Integra con Uvicorn (hereda handlers) para no duplicar.
"""
import logging

from ..core.config import settings

def setup_logging() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    # Ajusta loggers de uvicorn para no duplicar formato
    for uv_logger in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(uv_logger).setLevel(settings.LOG_LEVEL)
