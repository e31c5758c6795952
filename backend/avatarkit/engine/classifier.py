"""Element classification by id naming convention.

Artists mark customizable regions with suffixes in the element id:
``body_primary``, ``belly_secondary``, ``shadow_primarydark`` and so on.
"""

from __future__ import annotations

import enum


class Category(str, enum.Enum):
    PRIMARY = "primary"
    PRIMARY_DARK = "primaryDark"
    SECONDARY = "secondary"
    SECONDARY_DARK = "secondaryDark"
    NONE = "none"


def classify(element_id: str) -> Category:
    """Map an element id to its color category.

    Rules are checked in order and the first match wins:

    1. ``_primary`` without ``dark``      -> PRIMARY
    2. ``_primarydark``                   -> PRIMARY_DARK
    3. ``_secondary`` without ``dark``    -> SECONDARY
    4. ``_secondarydark``                 -> SECONDARY_DARK
    5. anything else                      -> NONE

    Matching is case-insensitive.
    """
    ident = element_id.lower()
    has_dark = "dark" in ident

    if "_primary" in ident and not has_dark:
        return Category.PRIMARY
    if "_primarydark" in ident:
        return Category.PRIMARY_DARK
    if "_secondary" in ident and not has_dark:
        return Category.SECONDARY
    if "_secondarydark" in ident:
        return Category.SECONDARY_DARK
    return Category.NONE
