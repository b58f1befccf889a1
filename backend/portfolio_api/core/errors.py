"""
Taxonomía de errores del pipeline de mensajes.
- Errores de argumento inválido: culpa del cliente, se responden con 400.
- Errores irrecuperables: el store falló o la escritura fue cancelada.
Los servicios devuelven OperationResult en lugar de lanzar excepciones.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel


class ErrorKind(str, Enum):
    EMPTY_CONTENT = "empty_content"
    CONTENT_TOO_LONG = "content_too_long"
    AUTHOR_TOO_LONG = "author_too_long"
    INTERRUPTED = "interrupted"
    STORE_WRITE_FAILED = "store_write_failed"

    @property
    def is_invalid_argument(self) -> bool:
        return self in _INVALID_ARGUMENT


_INVALID_ARGUMENT = frozenset({
    ErrorKind.EMPTY_CONTENT,
    ErrorKind.CONTENT_TOO_LONG,
    ErrorKind.AUTHOR_TOO_LONG,
})


class MessageOperationError(Exception):
    def __init__(self, kind: ErrorKind, detail: str) -> None:
        super().__init__(detail)
        self.kind = kind


class InvalidMessageError(MessageOperationError, ValueError):
    """Entrada inválida (contenido vacío, demasiado largo, autor largo)."""


class MessagePersistenceError(MessageOperationError, RuntimeError):
    """No se pudo persistir el mensaje (store caído o escritura cancelada)."""


class OperationResult(BaseModel):
    error: Optional[ErrorKind] = None
    detail: Optional[str] = None
    # excepción original del store (o la cancelación); nunca se descarta
    cause: Optional[BaseException] = None

    class Config:
        arbitrary_types_allowed = True

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls) -> "OperationResult":
        return cls()

    @classmethod
    def failure(
        cls,
        kind: ErrorKind,
        detail: str,
        cause: Optional[BaseException] = None,
    ) -> "OperationResult":
        return cls(error=kind, detail=detail, cause=cause)

    def raise_for_error(self) -> None:
        """
        Para quien prefiera excepciones: convierte el fallo en
        InvalidMessageError / MessagePersistenceError encadenando la causa.
        """
        if self.error is None:
            return
        exc_cls = InvalidMessageError if self.error.is_invalid_argument else MessagePersistenceError
        raise exc_cls(self.error, self.detail or self.error.value) from self.cause
