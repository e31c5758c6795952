"""Opening-tag scanner for colorable SVG elements.

Finds ``<path>``, ``<circle>``, ``<ellipse>``, ``<rect>``, ``<polygon>`` and
``<g>`` opening tags that carry an ``id`` and records where each one sits in the
raw text, so callers can splice a rewritten tag back without touching any
other byte of the document.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

COLORABLE_TAGS = ("path", "circle", "ellipse", "rect", "polygon", "g")

# Quoted attribute values may contain ">" so they are consumed as a unit.
# Comments and CDATA sections are matched first and skipped as a whole.
_OPEN_TAG_RE = re.compile(
    r"(?P<skip><!--.*?-->|<!\[CDATA\[.*?\]\]>)"
    r"|<(?P<tag>" + "|".join(COLORABLE_TAGS) + r")(?=[\s/>])"
    r"""(?:[^>"']|"[^"]*"|'[^']*')*>""",
    re.IGNORECASE | re.DOTALL,
)
_ATTR_RE = re.compile(
    r"""(?<![\w:.-])(?P<name>[A-Za-z_:][\w:.-]*)\s*=\s*(?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)')"""
)


@dataclass
class Attribute:
    """One ``name="value"`` pair inside a tag. Spans are relative to the tag text."""

    name: str
    value: str
    quote: str
    span: tuple[int, int]
    value_span: tuple[int, int]


@dataclass
class ElementTag:
    """An opening tag of a colorable element, located in the source document."""

    tag: str
    element_id: str
    source_tag: str
    source_span: tuple[int, int]
    attributes: list[Attribute] = field(default_factory=list)

    def get(self, name: str) -> Attribute | None:
        for attr in self.attributes:
            if attr.name == name:
                return attr
        return None


def extract_attrs(tag_text: str) -> list[Attribute]:
    """Parse the attributes of a single opening tag, in document order."""
    name_end = re.match(r"<[\w:.-]+", tag_text)
    start = name_end.end() if name_end else 0
    attrs: list[Attribute] = []
    for m in _ATTR_RE.finditer(tag_text, start):
        quoted = "dq" if m.group("dq") is not None else "sq"
        attrs.append(
            Attribute(
                name=m.group("name"),
                value=m.group(quoted),
                quote='"' if quoted == "dq" else "'",
                span=(m.start(), m.end()),
                value_span=(m.start(quoted), m.end(quoted)),
            )
        )
    return attrs


def find_colorable_elements(svg_text: str) -> list[ElementTag]:
    """Return every colorable opening tag that has an ``id``, in document order."""
    elements: list[ElementTag] = []
    for match in _OPEN_TAG_RE.finditer(svg_text):
        if match.group("skip") is not None:
            continue
        tag_text = match.group(0)
        attrs = extract_attrs(tag_text)
        id_attr = next((a for a in attrs if a.name == "id"), None)
        if id_attr is None:
            continue
        elements.append(
            ElementTag(
                tag=match.group("tag").lower(),
                element_id=id_attr.value,
                source_tag=tag_text,
                source_span=(match.start(), match.end()),
                attributes=attrs,
            )
        )
    logger.debug("Scanned SVG: %d colorable elements with ids", len(elements))
    return elements
