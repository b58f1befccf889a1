"""
Creación de índices de la colección de mensajes.
"""
from pymongo import ASCENDING, DESCENDING

from ..models.message import MESSAGES_COLLECTION

def ensure_indexes(db) -> None:
    # messageId lo genera el servicio; el upsert del store se apoya en este índice
    db[MESSAGES_COLLECTION].create_index([("messageId", ASCENDING)], unique=True)
    db[MESSAGES_COLLECTION].create_index([("createdAt", DESCENDING)])
