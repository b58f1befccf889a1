# backend/portfolio_api/main.py
"""
App FastAPI: CORS, lifespan (startup/shutdown), router de mensajes + middleware de trazas.
"""
import logging, time

# ⬇️ MUY ARRIBA, ANTES DE IMPORTAR settings
from dotenv import load_dotenv, find_dotenv
load_dotenv(find_dotenv())  # carga backend/.env sin pisar variables ya definidas

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .db.mongo import connect_to_store, disconnect_from_store
from .models.message import MongoMessageStore
from .routes import messages
from .services.message_service import MessagePersister
from .telemetry.logging import setup_logging
from .telemetry.otel import setup_otel

setup_logging()
http_logger = logging.getLogger("portfolio_api.http")

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_otel()
    db = connect_to_store()
    store = MongoMessageStore(db) if db is not None else None
    app.state.persister = MessagePersister(store)
    yield
    disconnect_from_store()

app = FastAPI(title="Portfolio Messages API", version="0.1.0", lifespan=lifespan)

# ---------------- CORS ----------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------- Middleware de trazas ----------------
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    try:
        response = await call_next(request)
        dur = round(time.time() - start, 4)
        http_logger.info(f"{request.method} {request.url.path} -> {response.status_code} in {dur}s")
        return response
    except Exception as e:
        dur = round(time.time() - start, 4)
        http_logger.exception(f"{request.method} {request.url.path} EXC after {dur}s: {e}")
        raise

# ---------------- Healthcheck ----------------
@app.get("/health", tags=["misc"])
async def health(request: Request):
    persister = request.app.state.persister
    return {"ok": True, "store": "mongo" if persister.store_available else "mock"}

# ---------------- Routers ----------------
app.include_router(messages.router, prefix="/messages", tags=["messages"])
