"""Caller palette and its derived shading tones.

Defaults come from ``avatarkit.config.settings``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from avatarkit.config import settings
from avatarkit.engine.classifier import Category
from avatarkit.engine.color import darken


@dataclass(frozen=True)
class Palette:
    primary: str = field(default_factory=lambda: settings.default_primary)
    secondary: str = field(default_factory=lambda: settings.default_secondary)


@dataclass(frozen=True)
class DerivedPalette:
    primary: str
    secondary: str
    primary_dark: str
    secondary_dark: str

    def color_for(self, category: Category) -> str | None:
        return {
            Category.PRIMARY: self.primary,
            Category.PRIMARY_DARK: self.primary_dark,
            Category.SECONDARY: self.secondary,
            Category.SECONDARY_DARK: self.secondary_dark,
        }.get(category)


def derive_palette(palette: Palette, factor: float | None = None) -> DerivedPalette:
    if factor is None:
        factor = settings.darken_factor
    return DerivedPalette(
        primary=palette.primary,
        secondary=palette.secondary,
        primary_dark=darken(palette.primary, factor),
        secondary_dark=darken(palette.secondary, factor),
    )
