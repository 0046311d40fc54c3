"""Configuration Pydantic models — pure schema, no infrastructure defaults."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HistoryConfig(BaseModel):
    max_capacity: int = Field(gt=0)


class StorageConfig(BaseModel):
    path: str | None = None  # None = platform user data directory


class ScratchConfig(BaseModel):
    surface_name: str = Field(min_length=1)


class AppConfig(BaseModel):
    history: HistoryConfig
    storage: StorageConfig
    scratch: ScratchConfig
