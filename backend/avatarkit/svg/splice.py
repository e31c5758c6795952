"""Span splicing — replace slices of an SVG string without re-serializing it."""

from __future__ import annotations

# (offset, length, replacement)
Splice = tuple[int, int, str]


def apply_splices(svg_raw: str, splices: list[Splice]) -> str:
    """Apply non-overlapping splices to ``svg_raw``.

    Offsets refer to the original string; text outside the spliced ranges is
    returned byte-identical.
    """
    if not splices:
        return svg_raw

    parts: list[str] = []
    cursor = 0
    for offset, length, replacement in sorted(splices, key=lambda s: s[0]):
        if offset < cursor:
            raise ValueError(f"Overlapping splice at offset {offset}")
        parts.append(svg_raw[cursor:offset])
        parts.append(replacement)
        cursor = offset + length
    parts.append(svg_raw[cursor:])
    return "".join(parts)
