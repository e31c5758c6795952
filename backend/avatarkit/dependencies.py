"""FastAPI dependency injection."""

from __future__ import annotations

from avatarkit.config import Settings, settings
from avatarkit.storage.templates import FileTemplateStore, TemplateStore


def get_settings() -> Settings:
    return settings


def get_template_store() -> TemplateStore:
    return FileTemplateStore(settings.template_dir)
