"""Map domain errors to JSON error responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from api.rate_limit import RateLimited
from llm.generation import GenerationError, GenerationNotConfigured
from registry.exceptions import AuthError, GolferNotFound, UpstreamUnavailable

logger = logging.getLogger(__name__)


class InvalidQuery(Exception):
    """Caller input that passed schema validation but still can't be used."""


def _error(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, **extra})


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    return f"Invalid request: {field} {first.get('msg', '')}".strip()


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        return _error(400, _validation_message(exc))

    @app.exception_handler(InvalidQuery)
    async def invalid_query(request: Request, exc: InvalidQuery):
        return _error(400, str(exc))

    @app.exception_handler(AuthError)
    async def auth_error(request: Request, exc: AuthError):
        return _error(401, str(exc))

    @app.exception_handler(GolferNotFound)
    async def golfer_not_found(request: Request, exc: GolferNotFound):
        return _error(404, str(exc))

    @app.exception_handler(RateLimited)
    async def rate_limited(request: Request, exc: RateLimited):
        return _error(429, str(exc))

    @app.exception_handler(UpstreamUnavailable)
    async def upstream_unavailable(request: Request, exc: UpstreamUnavailable):
        logger.error("Upstream unavailable on %s: %s", request.url.path, exc)
        return _error(500, str(exc))

    @app.exception_handler(GenerationNotConfigured)
    async def generation_not_configured(request: Request, exc: GenerationNotConfigured):
        logger.error("Roast requested but no generation API key is configured")
        return _error(500, "API key not configured", fallback=True)

    @app.exception_handler(GenerationError)
    async def generation_error(request: Request, exc: GenerationError):
        logger.error("Roast generation failed: %s", exc)
        return _error(500, "Roast generation failed", fallback=True)
