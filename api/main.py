"""FastAPI application for the Golf Roast API."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

import httpx
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from api.errors import register_error_handlers
from api.rate_limit import SlidingWindowRateLimiter, enforce_rate_limit
from config import Settings, get_settings
from llm.generation import GenerationClient
from llm.prompts import RoastPromptBuilder
from registry.client import RegistryClient
from registry.token_cache import ServiceTokenCache


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Open the registry HTTP client on startup, close it on shutdown."""
        http = httpx.AsyncClient(headers={"Content-Type": "application/json"})
        app.state.registry = RegistryClient(
            http,
            base_url=settings.ghin_base_url,
            service_user=settings.ghin_service_user,
            service_password=settings.ghin_service_password,
            token_cache=app.state.token_cache,
        )
        yield
        await http.aclose()

    app = FastAPI(
        title="Golf Roast API",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Process-scoped state shared across requests.
    app.state.settings = settings
    app.state.rate_limiter = SlidingWindowRateLimiter(
        max_requests=settings.rate_limit_requests,
        window_seconds=settings.rate_limit_window_seconds,
    )
    app.state.token_cache = ServiceTokenCache(ttl_seconds=settings.service_token_ttl_seconds)
    app.state.generator = GenerationClient(
        api_key=settings.google_api_key or "",
        model=settings.gemini_model,
    )
    app.state.prompt_builder = RoastPromptBuilder()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    from api.routers import golfers, roast
    limited = [Depends(enforce_rate_limit)]
    app.include_router(golfers.router, prefix="/api", tags=["golfers"], dependencies=limited)
    app.include_router(roast.router, prefix="/api", tags=["roast"], dependencies=limited)

    @app.get("/api/health")
    async def health():
        return {
            "status": "ok",
            "generation_configured": app.state.generator.is_configured,
        }

    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")

    return app


app = create_app()
