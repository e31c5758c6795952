"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from avatarkit import __version__
from avatarkit.dependencies import get_template_store
from avatarkit.models.responses import HealthResponse
from avatarkit.storage.templates import TemplateStore

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(store: TemplateStore = Depends(get_template_store)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        templates_available=len(await store.keys()),
    )
