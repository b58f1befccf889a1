# backend/portfolio_api/services/message_service.py
"""
Servicio de mensajes: normaliza la entrada, arma el documento y lo manda al
store. Si no hay store configurado (modo mock) solo deja rastro en el log.
Nunca lanza por errores del store: devuelve OperationResult.
"""
import asyncio
import logging
import uuid
from datetime import datetime, timezone
from typing import Callable, Optional

from ..core.errors import ErrorKind, OperationResult
from ..models.message import (
    MESSAGES_COLLECTION,
    SERVER_TIMESTAMP,
    MessageStore,
    StoredMessageDocument,
)
from .validation import is_blank

logger = logging.getLogger("portfolio_api.messages")

ANONYMOUS_AUTHOR = "Anonymous"
PREVIEW_LENGTH = 100


def resolve_author(author: Optional[str]) -> str:
    return ANONYMOUS_AUTHOR if is_blank(author) else author.strip()


def _preview(content: str) -> str:
    return content[:PREVIEW_LENGTH] + "..." if len(content) > PREVIEW_LENGTH else content


def _new_message_id() -> str:
    return str(uuid.uuid4())


class MessagePersister:
    def __init__(
        self,
        store: Optional[MessageStore],
        id_factory: Callable[[], str] = _new_message_id,
    ) -> None:
        self._store = store
        self._id_factory = id_factory
        if store is None:
            logger.warning("Store no configurado: mensajes en modo mock (solo log)")
        else:
            logger.info("MessagePersister inicializado con store %s", type(store).__name__)

    @property
    def store_available(self) -> bool:
        return self._store is not None

    async def save_message(self, author: Optional[str], content: Optional[str]) -> OperationResult:
        # se revalida aunque la ruta ya haya pasado por validate()
        if is_blank(content):
            return OperationResult.failure(ErrorKind.EMPTY_CONTENT, "Message content cannot be null or empty")

        effective_author = resolve_author(author)

        if not self.store_available:
            self._save_mock(effective_author, content)
            return OperationResult.success()

        return await self._save_to_store(effective_author, content)

    async def _save_to_store(self, author: str, content: str) -> OperationResult:
        doc = StoredMessageDocument(
            author=author,
            content=content,
            createdAt=SERVER_TIMESTAMP,
            messageId=self._id_factory(),
        )

        try:
            key = await self._store.add(MESSAGES_COLLECTION, doc.to_fields())
        except asyncio.CancelledError as e:
            # re-afirma la cancelación sobre la tarea del llamador
            task = asyncio.current_task()
            if task is not None:
                task.cancel()
            logger.error("Guardado interrumpido para author=%r", author)
            return OperationResult.failure(
                ErrorKind.INTERRUPTED, "Message save operation was interrupted", cause=e
            )
        except Exception as e:
            logger.exception("Fallo al guardar mensaje en el store para author=%r", author)
            return OperationResult.failure(
                ErrorKind.STORE_WRITE_FAILED, "Failed to save message to database", cause=e
            )

        logger.info("Mensaje guardado (key=%s, messageId=%s) para author=%r", key, doc.messageId, author)
        return OperationResult.success()

    def _save_mock(self, author: str, content: str) -> None:
        logger.info(
            "MOCK MODE - Message received: Author=%r, Content=%r, Timestamp=%s",
            author,
            _preview(content),
            datetime.now(timezone.utc).isoformat(),
        )
