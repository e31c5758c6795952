"""Merge a fill color into an element's inline style.

Only the ``style`` attribute is rewritten (or added). Every other attribute,
the tag name and the self-closing marker stay exactly as they were.
"""

from __future__ import annotations

import re

from avatarkit.svg.scanner import extract_attrs

_TAG_CLOSE_RE = re.compile(r"\s*/?>$")


def split_declarations(style_value: str) -> list[str]:
    """Split a style attribute value into trimmed, non-empty declarations.

    Only top-level ``;`` separates declarations. A ``;`` inside ``url(...)``,
    any other parenthesized value or a quoted string is part of the value, so
    ``background: url(data:image/png;base64,AAAA)`` comes back unchanged.
    """
    decls: list[str] = []
    start = 0
    depth = 0
    quote = ""
    i = 0
    while i < len(style_value):
        ch = style_value[i]
        if quote:
            if ch == "\\":
                i += 1
            elif ch == quote:
                quote = ""
        elif ch in "\"'":
            quote = ch
        elif ch == "(":
            depth += 1
        elif ch == ")" and depth:
            depth -= 1
        elif ch == ";" and depth == 0:
            decls.append(style_value[start:i])
            start = i + 1
        i += 1
    decls.append(style_value[start:])
    return [decl.strip() for decl in decls if decl.strip()]


def strip_fill(style_value: str) -> list[str]:
    """Declarations of ``style_value`` minus any ``fill`` ones, in order.

    ``fill-opacity`` and ``fill-rule`` are different properties and are kept.
    """
    kept: list[str] = []
    for decl in split_declarations(style_value):
        prop = decl.split(":", 1)[0].strip().lower()
        if prop != "fill":
            kept.append(decl)
    return kept


def build_style(color: str, style_value: str = "") -> str:
    remaining = strip_fill(style_value)
    fill = f"fill: {color}"
    if remaining:
        return fill + "; " + "; ".join(remaining)
    return fill


def merge_fill(tag_text: str, color: str) -> str:
    """Return ``tag_text`` with exactly one ``fill`` declaration, set to ``color``.

    ``<path id="a" style="fill: #f00; stroke: #000"/>`` with ``#0f0`` becomes
    ``<path id="a" style="fill: #0f0; stroke: #000"/>``; a tag without a style
    attribute gets ``style="fill: <color>"`` appended before its closing bracket.
    """
    style_attr = next((a for a in extract_attrs(tag_text) if a.name == "style"), None)

    if style_attr is not None:
        start, end = style_attr.value_span
        return tag_text[:start] + build_style(color, style_attr.value) + tag_text[end:]

    close = _TAG_CLOSE_RE.search(tag_text)
    if close is None:
        raise ValueError(f"Not an opening tag: {tag_text[:40]!r}")
    head = tag_text[: close.start()]
    tail = tag_text[close.start():]
    return f'{head} style="fill: {color}"{tail}'
