"""Hex color parsing and tonal derivation.

Colors travel through the engine as ``#rrggbb`` strings. ``darken`` scales each
channel independently, so a derived shade keeps the hue of its base color.
"""

from __future__ import annotations

import math
import re

_HEX6_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")
_HEX3_RE = re.compile(r"^#?([0-9a-fA-F]{3})$")


def parse_hex(color: str) -> tuple[int, int, int]:
    """Parse a 6-digit hex color (leading ``#`` optional) to (r, g, b)."""
    m = _HEX6_RE.match(color.strip())
    if not m:
        raise ValueError(f"Not a 6-digit hex color: {color!r}")
    digits = m.group(1)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def to_hex(rgb: tuple[int, int, int]) -> str:
    r, g, b = rgb
    return f"#{r:02x}{g:02x}{b:02x}"


def is_hex_color(value: str) -> bool:
    """True for 3- or 6-digit hex colors, with or without ``#``."""
    value = value.strip()
    return bool(_HEX6_RE.match(value) or _HEX3_RE.match(value))


def normalize_hex(value: str) -> str:
    """Expand shorthand and lowercase: ``FA0`` -> ``#ffaa00``."""
    value = value.strip()
    m = _HEX3_RE.match(value)
    if m:
        value = "".join(ch * 2 for ch in m.group(1))
    return to_hex(parse_hex(value))


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def darken(color: str, factor: float) -> str:
    """Scale every channel of ``color`` by ``1 - factor``.

    ``darken("#ffffff", 0.2) == "#cccccc"``. The factor is expected in
    [0, 1); it is not range-checked.
    """
    r, g, b = parse_hex(color)
    scale = 1 - factor
    return to_hex((_round_half_up(r * scale), _round_half_up(g * scale), _round_half_up(b * scale)))
