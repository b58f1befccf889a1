"""
Validación de la petición antes de cualquier intento de persistencia.
Función pura: sin logs ni I/O.
"""
from typing import Optional

from ..core.errors import ErrorKind, OperationResult

MAX_CONTENT_LENGTH = 1000
MAX_AUTHOR_LENGTH = 100

ValidationOutcome = OperationResult


def is_blank(text: Optional[str]) -> bool:
    return text is None or not text.strip()


def validate(content: Optional[str], author: Optional[str]) -> ValidationOutcome:
    if is_blank(content):
        return ValidationOutcome.failure(ErrorKind.EMPTY_CONTENT, "Message content cannot be empty")

    if len(content.strip()) > MAX_CONTENT_LENGTH:
        return ValidationOutcome.failure(
            ErrorKind.CONTENT_TOO_LONG,
            f"Message content cannot exceed {MAX_CONTENT_LENGTH} characters",
        )

    # el autor se mide sin recortar; el trim solo aplica al guardar
    if author is not None and len(author) > MAX_AUTHOR_LENGTH:
        return ValidationOutcome.failure(
            ErrorKind.AUTHOR_TOO_LONG,
            f"Author name cannot exceed {MAX_AUTHOR_LENGTH} characters",
        )

    return ValidationOutcome.success()
