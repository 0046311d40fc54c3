"""Gateway: YAML configuration loader — implements ConfigLoader port."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import yaml

from scrap_paper.l1_entities.config import AppConfig
from scrap_paper.l1_entities.errors import InvalidConfigError
from scrap_paper.l3_interface_adapters.gateways import paths

log = logging.getLogger('scrap.config')


class YamlConfigLoader:
    """Reads an explicit YAML file, or the first existing file on the search path.

    ``source`` records which file was used (None when nothing was found).
    """

    def __init__(self, search_paths: Sequence[Path] | None = None) -> None:
        self._search_paths = search_paths
        self.source: Path | None = None

    def load(self, config_path: str | None = None, overrides: dict | None = None) -> AppConfig:
        return AppConfig.model_validate(self.load_raw(config_path, overrides))

    def load_raw(self, config_path: str | None = None, overrides: dict | None = None) -> dict:
        self.source = self._resolve(config_path)
        data = _read_mapping(self.source) if self.source is not None else {}
        if overrides:
            deep_merge(data, overrides)
        return data

    def _resolve(self, config_path: str | None) -> Path | None:
        if config_path is not None:
            path = Path(config_path).expanduser()
            if not path.is_file():
                raise FileNotFoundError(f'Config file not found: {path}')
            return path
        candidates = paths.DEFAULT_CONFIG_PATHS if self._search_paths is None else self._search_paths
        return next((p for p in candidates if p.is_file()), None)


def _read_mapping(path: Path) -> dict:
    try:
        data = yaml.safe_load(path.read_text(encoding='utf-8'))
    except yaml.YAMLError as e:
        raise InvalidConfigError(f'{path}: not valid YAML ({e})') from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidConfigError(f'{path}: expected a mapping at the top level, got {type(data).__name__}')
    log.info('Config loaded from %s', path)
    return data


def deep_merge(base: dict, override: dict) -> dict:
    """Merge *override* into *base* in place; nested mappings merge, anything else replaces."""
    for key, value in override.items():
        current = base.get(key)
        base[key] = deep_merge(current, value) if isinstance(current, dict) and isinstance(value, dict) else value
    return base
