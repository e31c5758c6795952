"""GET /api/avatar/{character_id} — recolored character SVGs."""

from __future__ import annotations

import logging
from typing import Literal
from urllib.parse import quote, urlencode

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from avatarkit.config import Settings
from avatarkit.dependencies import get_settings, get_template_store
from avatarkit.engine.color import is_hex_color, normalize_hex
from avatarkit.engine.color_map import swap_known_colors
from avatarkit.engine.palette import Palette, derive_palette
from avatarkit.engine.recolor import recolor
from avatarkit.engine.sanitize import sanitize_identifier
from avatarkit.errors import InvalidColor, ProcessingFailure, TemplateNotFound
from avatarkit.models.responses import (
    AvatarPreviewResponse,
    ColorPair,
    ErrorResponse,
    TemplateListResponse,
)
from avatarkit.storage.templates import TemplateStore

router = APIRouter(prefix="/avatar")
logger = logging.getLogger(__name__)

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Malformed palette color"},
    404: {"model": ErrorResponse, "description": "No template for the character"},
    500: {"model": ErrorResponse, "description": "Rendering failed"},
}


def _resolve_color(name: str, value: str | None, default: str) -> str:
    """Validate a query color, falling back to the configured default."""
    raw = value if value else default
    if not is_hex_color(raw):
        raise InvalidColor(name, raw)
    return normalize_hex(raw)


def _parse_items(items: str | None) -> list[str]:
    if not items:
        return []
    return [item.strip() for item in items.split(",") if item.strip()]


@router.get("", response_model=TemplateListResponse)
async def list_avatars(store: TemplateStore = Depends(get_template_store)) -> TemplateListResponse:
    return TemplateListResponse(characters=await store.keys())


@router.get(
    "/{character_id}/preview",
    response_model=AvatarPreviewResponse,
    responses={400: _ERROR_RESPONSES[400]},
)
async def preview_avatar(
    character_id: str,
    primary: str | None = Query(None),
    secondary: str | None = Query(None),
    settings: Settings = Depends(get_settings),
) -> AvatarPreviewResponse:
    primary = _resolve_color("primary", primary, settings.default_primary)
    secondary = _resolve_color("secondary", secondary, settings.default_secondary)
    query = urlencode({"primary": primary, "secondary": secondary})
    return AvatarPreviewResponse(
        character_id=character_id,
        colors=ColorPair(primary=primary, secondary=secondary),
        url=f"/api/avatar/{quote(character_id, safe='')}?{query}",
    )


@router.get(
    "/{character_id}",
    response_class=Response,
    responses={200: {"content": {"image/svg+xml": {}}}, **_ERROR_RESPONSES},
)
async def render_avatar(
    character_id: str,
    primary: str | None = Query(None),
    secondary: str | None = Query(None),
    items: str | None = Query(None, description="Comma-separated item ids (not composed yet)"),
    strategy: Literal["tagged", "colors"] = Query("tagged"),
    settings: Settings = Depends(get_settings),
    store: TemplateStore = Depends(get_template_store),
) -> Response:
    palette = Palette(
        primary=_resolve_color("primary", primary, settings.default_primary),
        secondary=_resolve_color("secondary", secondary, settings.default_secondary),
    )
    item_ids = _parse_items(items)
    key = sanitize_identifier(character_id)
    logger.info(
        "Avatar request: %r -> %r, primary=%s secondary=%s strategy=%s",
        character_id, key, palette.primary, palette.secondary, strategy,
    )
    if item_ids:
        logger.info("Ignoring %d requested items; composition is not supported", len(item_ids))

    try:
        svg_text = await store.load(key)
        if strategy == "colors":
            result = swap_known_colors(svg_text, key, palette)
        else:
            result = recolor(svg_text, derive_palette(palette, settings.darken_factor))
    except TemplateNotFound:
        raise
    except Exception as e:
        logger.exception("Failed to process avatar %s", key)
        raise ProcessingFailure(str(e)) from e

    return Response(
        content=result.svg,
        media_type="image/svg+xml",
        headers={
            "Cache-Control": f"public, max-age={settings.cache_max_age}",
            "X-Avatar-Replacements": str(result.replaced),
        },
    )
