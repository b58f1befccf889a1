"""
Mensajes de visitantes del portafolio.
- Modelos de entrada/salida HTTP.
- Documento que se guarda en la colección `messages`.
- Store de documentos: protocolo + implementación sobre PyMongo.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional, Protocol, Union

from anyio import to_thread
from pydantic import BaseModel
from pymongo.errors import DuplicateKeyError

MESSAGES_COLLECTION = "messages"


class _ServerTimestamp:
    """Marca un campo cuyo valor lo asigna el store al momento de escribir."""

    def __repr__(self) -> str:
        return "SERVER_TIMESTAMP"


SERVER_TIMESTAMP = _ServerTimestamp()


# ---------- Pydantic (HTTP) ----------
class CreateMessageRequest(BaseModel):
    # sin restricciones aquí: services/validation.py es la única puerta (400, no 422)
    content: Optional[str] = None
    author: Optional[str] = None


class MessageResponse(BaseModel):
    message: str
    success: bool

    @classmethod
    def ok(cls, message: str) -> "MessageResponse":
        return cls(message=message, success=True)

    @classmethod
    def error(cls, message: str) -> "MessageResponse":
        return cls(message=message, success=False)


# ---------- Documento ----------
class StoredMessageDocument(BaseModel):
    author: str
    content: str
    createdAt: Union[datetime, _ServerTimestamp] = SERVER_TIMESTAMP
    messageId: str

    class Config:
        arbitrary_types_allowed = True

    def to_fields(self) -> Dict[str, Any]:
        return self.model_dump()


# ---------- Store ----------
class MessageStore(Protocol):
    async def add(self, collection: str, fields: Dict[str, Any]) -> str:
        """
        Crea un documento nuevo con llave generada por el store y espera el ack.
        Devuelve la llave asignada.
        """
        ...


class MongoMessageStore:
    """
    Escritura sobre PyMongo (síncrono) en un hilo aparte, como los demás repos.
    Los campos SERVER_TIMESTAMP se resuelven en el servidor con $currentDate;
    el _id lo genera MongoDB. El filtro nunca coincide (todo doc tiene _id), así que
    el upsert siempre inserta; un messageId repetido choca con el índice único.
    """

    def __init__(self, db) -> None:
        self.db = db

    async def add(self, collection: str, fields: Dict[str, Any]) -> str:
        col = self.db[collection]
        plain = {k: v for k, v in fields.items() if v is not SERVER_TIMESTAMP and k != "messageId"}
        server_dates = {k: True for k, v in fields.items() if v is SERVER_TIMESTAMP}

        update: Dict[str, Any] = {"$setOnInsert": plain}
        if server_dates:
            update["$currentDate"] = server_dates

        def _write() -> str:
            res = col.update_one(
                {"messageId": fields["messageId"], "_id": {"$exists": False}},
                update,
                upsert=True,
            )
            if res.upserted_id is None:
                raise DuplicateKeyError(f"messageId {fields['messageId']!r} ya existe; no se insertó nada")
            return str(res.upserted_id)

        return await to_thread.run_sync(_write)
