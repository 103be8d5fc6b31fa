"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from echoday.api import webhooks
from echoday.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: one store/dispatcher pair for the whole process
    from echoday.database import async_session, init_db
    from echoday.services.kv_store import SqlKeyValueBackend
    from echoday.services.webhook_dispatcher import WebhookDispatcher
    from echoday.services.webhook_service import WebhookService
    from echoday.services.webhook_store import WebhookStore

    await init_db()
    store = WebhookStore(SqlKeyValueBackend(async_session), settings.webhook_storage_key)
    await store.load()
    app.state.webhook_service = WebhookService(
        store,
        WebhookDispatcher(backoff_seconds=settings.webhook_backoff_seconds),
        settings,
    )

    yield


app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    description="Outbound webhooks for EchoDay events",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(webhooks.router, prefix="/api/v1")


@app.get("/health")
async def health():
    return {"status": "ok", "app": settings.app_name}
