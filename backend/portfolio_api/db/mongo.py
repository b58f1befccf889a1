# backend/portfolio_api/db/mongo.py
import logging
from typing import Optional

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from ..core.config import settings
from .indexes import ensure_indexes

logger = logging.getLogger("portfolio_api.db")

_client: Optional[MongoClient] = None
_db: Optional[Database] = None

def connect_to_store() -> Optional[Database]:
    """
    Conecta a Mongo y crea índices. Se llama en startup (lifespan) y es SINCRÓNICO.
    Devuelve None si el store está deshabilitado o no responde: la app sigue
    arriba en modo mock.
    """
    global _client, _db
    if _client:
        return _db

    if not settings.STORE_ENABLED:
        logger.info("Store deshabilitado por configuración (STORE_ENABLED=false)")
        return None

    client = MongoClient(
        settings.MONGO_URI,
        uuidRepresentation="standard",
        serverSelectionTimeoutMS=settings.MONGO_TIMEOUT_MS,
    )
    try:
        client.admin.command("ping")
        db = client[settings.MONGO_DB]
        ensure_indexes(db)
    except PyMongoError as e:
        logger.warning("No se pudo conectar a Mongo en %s: %s", settings.MONGO_URI, e)
        client.close()
        return None

    _client, _db = client, db
    logger.info("Conectado a Mongo (db=%s)", settings.MONGO_DB)
    return _db


def disconnect_from_store() -> None:
    """
    Cierra la conexión. Si la DB se llama portfolio_test_*, la borra.
    """
    global _client, _db
    if _client:
        dbname = settings.MONGO_DB
        if dbname.startswith("portfolio_test_"):
            _client.drop_database(dbname)
        _client.close()
    _client = None
    _db = None


def get_db() -> Optional[Database]:
    return _db
