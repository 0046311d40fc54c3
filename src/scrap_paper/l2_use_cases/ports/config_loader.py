"""Port: configuration loader."""

from __future__ import annotations

from typing import Protocol

from scrap_paper.l1_entities.config import AppConfig


class ConfigLoader(Protocol):
    """Reads user settings; defaults are layered on by the caller."""

    def load(self, config_path: str | None = None, overrides: dict | None = None) -> AppConfig: ...

    def load_raw(self, config_path: str | None = None, overrides: dict | None = None) -> dict:
        """Merged user settings as a plain dict, before validation."""
        ...
