"""Domain errors raised by the recoloring engine and template storage."""

from __future__ import annotations


class AvatarError(Exception):
    """Base class for avatar service errors."""


class TemplateNotFound(AvatarError):
    """No template document exists for a sanitized character key."""

    def __init__(self, key: str) -> None:
        super().__init__(f"No avatar template for {key!r}")
        self.key = key


class InvalidColor(AvatarError):
    """A caller-supplied color is not a 3- or 6-digit hex color."""

    def __init__(self, name: str, value: str) -> None:
        super().__init__(f"{name} must be a hex color like #a1b2c3, got {value!r}")
        self.name = name
        self.value = value


class ProcessingFailure(AvatarError):
    """Anything that went wrong while rendering an avatar. Details are logged, not exposed."""
