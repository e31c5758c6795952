"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from avatarkit import __version__
from avatarkit.config import settings
from avatarkit.errors import InvalidColor, ProcessingFailure, TemplateNotFound
from avatarkit.models.responses import ErrorResponse

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.avatarkit_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="AvatarKit",
        description="Character avatar recoloring — palette-driven SVG fills",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_error_handlers(app)

    from avatarkit.api.router import api_router

    app.include_router(api_router)

    return app


def _error(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def _register_error_handlers(app: FastAPI) -> None:
    """Map domain errors to JSON bodies. Internal detail never reaches the client."""

    @app.exception_handler(TemplateNotFound)
    async def _not_found(request: Request, exc: TemplateNotFound) -> JSONResponse:
        return _error(404, ErrorResponse(error="Avatar not found"))

    @app.exception_handler(InvalidColor)
    async def _invalid_color(request: Request, exc: InvalidColor) -> JSONResponse:
        return _error(400, ErrorResponse(error="Invalid color", detail=str(exc)))

    @app.exception_handler(ProcessingFailure)
    async def _processing_failure(request: Request, exc: ProcessingFailure) -> JSONResponse:
        return _error(500, ErrorResponse(error="Failed to process avatar"))


app = create_app()
