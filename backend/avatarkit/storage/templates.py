"""Template storage — one SVG document per sanitized character key."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Protocol

from avatarkit.errors import TemplateNotFound

logger = logging.getLogger(__name__)


class TemplateStore(Protocol):
    async def load(self, key: str) -> str: ...

    async def keys(self) -> list[str]: ...


class FileTemplateStore:
    """Reads ``<base_dir>/<key>.svg``.

    Keys are expected to be sanitized already; anything that would leave
    ``base_dir`` is treated as missing.
    """

    def __init__(self, base_dir: Path) -> None:
        self.base_dir = Path(base_dir)

    def _path_for(self, key: str) -> Path:
        if not key:
            raise TemplateNotFound(key)
        path = (self.base_dir / f"{key}.svg").resolve()
        if path.parent != self.base_dir.resolve():
            raise TemplateNotFound(key)
        return path

    async def load(self, key: str) -> str:
        path = self._path_for(key)
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(None, lambda: path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            logger.info("Template %s not found at %s", key, path)
            raise TemplateNotFound(key) from e

    def _list_keys(self) -> list[str]:
        if not self.base_dir.is_dir():
            return []
        return sorted(p.stem for p in self.base_dir.glob("*.svg"))

    async def keys(self) -> list[str]:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._list_keys)


class InMemoryTemplateStore:
    """Dict-backed store, for tests and embedded use."""

    def __init__(self, templates: dict[str, str] | None = None) -> None:
        self._templates = dict(templates or {})

    async def load(self, key: str) -> str:
        try:
            return self._templates[key]
        except KeyError as e:
            raise TemplateNotFound(key) from e

    async def keys(self) -> list[str]:
        return sorted(self._templates)
