"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    templates_available: int = 0


class ColorPair(BaseModel):
    primary: str
    secondary: str


class AvatarPreviewResponse(BaseModel):
    character_id: str = Field(..., serialization_alias="characterId")
    colors: ColorPair
    url: str
    note: str = "Use the url field as the src for an img tag"


class TemplateListResponse(BaseModel):
    characters: list[str] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    error: str
    detail: str | None = None
