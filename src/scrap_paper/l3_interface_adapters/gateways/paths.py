"""Shared path constants for configuration and snapshot storage."""

from __future__ import annotations

from platformdirs import user_config_path, user_data_path

APP_NAME = 'scrap-paper'

CONFIG_DIR = user_config_path(APP_NAME)
DATA_DIR = user_data_path(APP_NAME)

STORAGE_PATH = DATA_DIR / 'scrappaper_storage.json'

DEFAULT_CONFIG_PATHS = [
    CONFIG_DIR / 'config.yaml',
    CONFIG_DIR / 'config.yml',
]
