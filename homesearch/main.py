from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api_router import router
from .config import settings


logger = logging.getLogger(__name__)


def configure_logging(level: str = settings.log_level) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Shared async HTTP client for outbound RentCast calls
    app.state.http_client = httpx.AsyncClient(timeout=settings.http_timeout_seconds)
    if not settings.has_rentcast_api_key:
        logger.info("RENTCAST_API_KEY not set, serving sample listings only")
    try:
        yield
    finally:
        await app.state.http_client.aclose()
        app.state.http_client = None


app = FastAPI(title=settings.app_name, lifespan=lifespan)


# CORS
allow_origins = [origin.strip() for origin in settings.cors_allow_origins.split(",") if origin.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


app.include_router(router)
