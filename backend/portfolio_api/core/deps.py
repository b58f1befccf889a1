"""
Dependencias comunes para FastAPI:
- current_persister (armado en el lifespan y guardado en app.state)
"""
from fastapi import Request
from ..services.message_service import MessagePersister

def current_persister(request: Request) -> MessagePersister:
    return request.app.state.persister
