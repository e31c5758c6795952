"""Character identifier sanitization.

Template lookups are keyed by file name, so the incoming identifier is reduced
to ``[a-z0-9_-]``. Nothing that survives can form ``/`` or ``..``.
"""

from __future__ import annotations

import re

_WHITESPACE_RE = re.compile(r"\s+")
_DISALLOWED_RE = re.compile(r"[^a-z0-9_-]")


def sanitize_identifier(raw: str) -> str:
    """``"Red Panda #1!"`` -> ``"red_panda_1"``. May return an empty string."""
    key = raw.lower()
    key = _WHITESPACE_RE.sub("_", key)
    return _DISALLOWED_RE.sub("", key)
