"""
Formulario de contacto del portafolio: recibe el mensaje y lo delega al servicio.
"""
import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ..core.deps import current_persister
from ..models.message import CreateMessageRequest, MessageResponse
from ..services.message_service import ANONYMOUS_AUTHOR, MessagePersister
from ..services.validation import validate

router = APIRouter()
logger = logging.getLogger("portfolio_api.http")

SUCCESS_TEXT = "Message sent successfully!"
FAILURE_TEXT = "Unable to process your message. Please try again later."


def _reply(code: int, body: MessageResponse) -> JSONResponse:
    return JSONResponse(status_code=code, content=body.model_dump())


@router.post("", response_model=MessageResponse, summary="Enviar mensaje")
async def create_message(payload: CreateMessageRequest, persister: MessagePersister = Depends(current_persister)):
    """
    400 si la entrada es inválida, 500 si no se pudo persistir.
    """
    logger.info("Mensaje recibido de: %s", payload.author or ANONYMOUS_AUTHOR)

    outcome = validate(payload.content, payload.author)
    if not outcome.ok:
        logger.warning("Petición inválida: %s", outcome.detail)
        return _reply(status.HTTP_400_BAD_REQUEST, MessageResponse.error(f"Invalid message data: {outcome.detail}"))

    result = await persister.save_message(payload.author, payload.content)
    if result.ok:
        return MessageResponse.ok(SUCCESS_TEXT)

    if result.error.is_invalid_argument:
        return _reply(status.HTTP_400_BAD_REQUEST, MessageResponse.error(f"Invalid message data: {result.detail}"))

    logger.error("No se pudo guardar el mensaje: %s (%s)", result.error.value, result.cause)
    return _reply(status.HTTP_500_INTERNAL_SERVER_ERROR, MessageResponse.error(FAILURE_TEXT))
