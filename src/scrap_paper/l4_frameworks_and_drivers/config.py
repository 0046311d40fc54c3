"""Application config defaults and the build_app_config factory — lives in L4, not domain."""

from __future__ import annotations

import copy
from pathlib import Path

from scrap_paper.l1_entities.config import AppConfig
from scrap_paper.l3_interface_adapters.gateways.paths import STORAGE_PATH
from scrap_paper.l3_interface_adapters.gateways.yaml_config_loader import deep_merge

APP_CONFIG_DEFAULTS: dict = {
    'history': {
        'max_capacity': 16,
    },
    'storage': {
        'path': None,
    },
    'scratch': {
        'surface_name': 'Scrap Paper',
    },
}


def build_app_config(raw: dict) -> AppConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, raw)
    return AppConfig.model_validate(merged)


def storage_path(config: AppConfig) -> Path:
    """Resolve the snapshot blob location; unset means the platform data directory."""
    if config.storage.path:
        return Path(config.storage.path).expanduser()
    return STORAGE_PATH
