"""Recolor pipeline — applies a derived palette to the tagged regions of a template."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field

from avatarkit.engine.classifier import Category, classify
from avatarkit.engine.palette import DerivedPalette
from avatarkit.engine.style_merge import merge_fill
from avatarkit.svg.scanner import find_colorable_elements
from avatarkit.svg.splice import Splice, apply_splices

_logger = logging.getLogger(__name__)


@dataclass
class RecolorResult:
    svg: str
    replaced: int = 0
    by_category: dict[str, int] = field(default_factory=dict)


def recolor(
    svg_text: str,
    palette: DerivedPalette,
    logger: logging.Logger | None = None,
) -> RecolorResult:
    """Set the fill of every tagged element in ``svg_text`` from ``palette``.

    Untagged elements and all text between tags come back byte-identical. Running
    the result through again with the same palette changes nothing.
    """
    log = logger or _logger
    splices: list[Splice] = []
    counts: Counter[str] = Counter()

    for element in find_colorable_elements(svg_text):
        category = classify(element.element_id)
        if category is Category.NONE:
            continue
        color = palette.color_for(category)
        new_tag = merge_fill(element.source_tag, color)
        start, end = element.source_span
        splices.append((start, end - start, new_tag))
        counts[category.value] += 1
        log.debug("Recolor %s#%s -> %s (%s)", element.tag, element.element_id, color, category.value)

    replaced = sum(counts.values())
    log.info("Recolor complete: %d elements filled", replaced)
    return RecolorResult(
        svg=apply_splices(svg_text, splices),
        replaced=replaced,
        by_category=dict(counts),
    )
