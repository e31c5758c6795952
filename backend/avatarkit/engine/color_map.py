"""Known-color substitution for templates without id tags.

Older character artwork has no ``_primary`` / ``_secondary`` ids. For those the
service swaps the artwork's own fur/feather colors, listed per character below,
onto the caller's palette. Only fill values are touched: ``fill="..."``
attributes and ``fill:`` declarations in inline styles or ``<style>`` blocks.
"""

from __future__ import annotations

import logging
import re
from collections import Counter

from avatarkit.engine.classifier import Category
from avatarkit.engine.palette import Palette
from avatarkit.engine.recolor import RecolorResult

_logger = logging.getLogger(__name__)

_P = Category.PRIMARY
_S = Category.SECONDARY

COLOR_MAPPINGS: dict[str, dict[str, Category]] = {
    "meerkat": {
        "#dbb79c": _P,  # main fur
        "#f0d6c2": _S,  # light fur
        "#e8c3a3": _S,
        "#d3ae91": _P,
        "#895f4a": _P,  # dark accents
        "#875c4b": _P,
        "#df9c8d": _S,
    },
    "panda": {
        "#444": _P,
        "#1e1e1e": _P,  # black patches
        "#282828": _P,
        "#4d4d4d": _P,
        "#fff": _S,     # white fur
        "#b7483d": _S,  # nose/mouth
    },
    "border_collie": {
        "#8b4513": _P,
        "#a0522d": _P,
        "#d2691e": _P,
        "#ffffff": _S,  # white markings
        "#f5deb3": _S,
        "#fff8dc": _S,
    },
    "owl": {
        "#8b7355": _P,  # feathers
        "#a0826d": _P,
        "#6b4e3d": _P,
        "#f5deb3": _S,
        "#fff8dc": _S,
        "#faebd7": _S,
    },
    "otter": {
        "#6c4c40": _P,
        "#4c3b3b": _P,
        "#4f3a33": _P,
        "#755c51": _P,
        "#896f62": _P,
        "#f6edd7": _S,
        "#d2b7a5": _S,
        "#f2f2f2": _S,
        "#dba39f": _S,
    },
}
COLOR_MAPPINGS["default"] = dict(COLOR_MAPPINGS["meerkat"])


def _fill_value_re(colors: list[str]) -> re.Pattern[str]:
    # Longest first so "#4445aa" is never split as "#444" + "5aa"
    alternatives = "|".join(re.escape(c) for c in sorted(colors, key=len, reverse=True))
    return re.compile(
        r"""(?<![\w-])(?P<lead>fill\s*(?::\s*|=\s*["']))(?P<color>""" + alternatives + r")(?![0-9a-fA-F])",
        re.IGNORECASE,
    )


def swap_known_colors(
    svg_text: str,
    character: str,
    palette: Palette,
    logger: logging.Logger | None = None,
) -> RecolorResult:
    """Replace each known artwork color of ``character`` with its palette color.

    Characters without their own table use ``default``. Substitution is a single
    pass, so a palette color that happens to appear in the table is never
    replaced a second time.
    """
    log = logger or _logger
    mapping = COLOR_MAPPINGS.get(character, COLOR_MAPPINGS["default"])
    targets = {
        Category.PRIMARY: palette.primary,
        Category.SECONDARY: palette.secondary,
    }
    counts: Counter[str] = Counter()

    def _sub(m: re.Match[str]) -> str:
        original = m.group("color").lower()
        category = mapping[original]
        counts[category.value] += 1
        return m.group("lead") + targets[category]

    result = _fill_value_re(list(mapping)).sub(_sub, svg_text)
    replaced = sum(counts.values())
    log.info("Known-color swap for %s: %d fills replaced", character, replaced)
    return RecolorResult(svg=result, replaced=replaced, by_category=dict(counts))
