"""Avatar recoloring engine."""

from avatarkit.engine.classifier import Category, classify
from avatarkit.engine.color import darken
from avatarkit.engine.palette import DerivedPalette, Palette, derive_palette
from avatarkit.engine.recolor import RecolorResult, recolor
from avatarkit.engine.sanitize import sanitize_identifier

__all__ = [
    "Category",
    "classify",
    "darken",
    "DerivedPalette",
    "Palette",
    "derive_palette",
    "RecolorResult",
    "recolor",
    "sanitize_identifier",
]
