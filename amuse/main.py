# amuse/main.py
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from amuse.config import AMUSE_CORS_ORIGINS, APP_VERSION
from amuse.routers.query import router as query_router
from amuse.services.state_provider import StateProvider, close_provider, default_state_provider

logger = logging.getLogger(__name__)


def create_app(provider: StateProvider | None = None) -> FastAPI:
    """Build the app around one state provider. Defaults to the host's HTTP bridge."""
    provider = provider if provider is not None else default_state_provider()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        await close_provider(app.state.state_provider)
        logger.debug("🧹 State provider closed")

    app = FastAPI(
        title="Amuse Now Playing API",
        version=APP_VERSION,
        lifespan=lifespan,
    )
    app.state.state_provider = provider

    # 🔓 CORS: browser overlays poll /query from their own origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=AMUSE_CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(query_router)
    return app


app = create_app()
