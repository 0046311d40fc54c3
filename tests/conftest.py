"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from scrap_paper.l1_entities.config import AppConfig
from scrap_paper.l1_entities.errors import SurfaceCreationError
from scrap_paper.l3_interface_adapters.controllers.scratch_controller import ScratchController
from scrap_paper.l4_frameworks_and_drivers.config import build_app_config

# --- Protocol-conforming Fakes ---


class FakeSurfaceHost:
    """Fake host surface for L2/L3 tests — implements SurfaceHost protocol."""

    def __init__(self, initial: str = 'doc-1') -> None:
        self.lines: dict[str, list[str]] = {initial: ['']}
        self.active: str | None = initial
        self.created: list[str] = []
        self.set_lines_calls: list[tuple[str, list[str]]] = []
        self.fail_create = False
        self._callbacks: dict[str, list[Callable[[], None]]] = {}

    def create_surface(self, name: str) -> str:
        if self.fail_create:
            raise SurfaceCreationError('host refused to create surface')
        handle = f'scratch-{len(self.created) + 1}'
        self.created.append(name)
        self.lines[handle] = ['']
        return handle

    def get_lines(self, handle: str) -> list[str]:
        return list(self.lines[handle])

    def set_lines(self, handle: str, lines: Sequence[str]) -> None:
        self.set_lines_calls.append((handle, list(lines)))
        self.lines[handle] = list(lines)

    def active_surface(self) -> str | None:
        return self.active

    def activate(self, handle: str) -> None:
        self.active = handle

    def is_valid(self, handle: str) -> bool:
        return handle in self.lines

    def on_destroy(self, handle: str, callback: Callable[[], None]) -> None:
        self._callbacks.setdefault(handle, []).append(callback)

    # --- test helpers ---

    def add_surface(self, handle: str, lines: list[str] | None = None) -> None:
        self.lines[handle] = lines or ['']

    def destroy(self, handle: str) -> None:
        del self.lines[handle]
        if self.active == handle:
            self.active = next(iter(self.lines), None)
        for callback in self._callbacks.pop(handle, []):
            callback()

    def type_into_active(self, lines: list[str]) -> None:
        self.lines[self.active] = list(lines)


class FakeBlobStore:
    """Fake blob store for L2/L3 tests — implements BlobStore protocol."""

    def __init__(self, data: bytes | None = None) -> None:
        self.data = data
        self.read_calls = 0
        self.writes: list[bytes] = []
        self.fail_write = False

    def read(self) -> bytes:
        self.read_calls += 1
        if self.data is None:
            raise FileNotFoundError('scrappaper_storage.json: No such file or directory')
        return self.data

    def write(self, data: bytes) -> None:
        if self.fail_write:
            raise PermissionError('scrappaper_storage.json: Permission denied')
        self.writes.append(data)
        self.data = data

    @classmethod
    def with_history(cls, history: list[list[str]]) -> FakeBlobStore:
        return cls(json.dumps(history).encode('utf-8'))

    def stored(self) -> list[list[str]]:
        return json.loads(self.data)


# --- Standard Fixtures ---


@pytest.fixture
def default_config() -> AppConfig:
    return build_app_config({})


@pytest.fixture
def fake_host() -> FakeSurfaceHost:
    return FakeSurfaceHost()


@pytest.fixture
def fake_store() -> FakeBlobStore:
    return FakeBlobStore()


@pytest.fixture
def make_controller(default_config: AppConfig, fake_host: FakeSurfaceHost) -> Callable[..., ScratchController]:
    """Build a controller over *fake_host* with the given store, already swapped into the scrap paper."""

    def _make(store: FakeBlobStore, *, swapped_in: bool = True, config: AppConfig | None = None) -> ScratchController:
        ctrl = ScratchController(config=config or default_config, host=fake_host, store=store)
        if swapped_in:
            ctrl.swap()
        return ctrl

    return _make


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    content = """\
history:
  max_capacity: 4
storage:
  path: "~/scrap/storage.json"
scratch:
  surface_name: "Notes"
"""
    p = tmp_path / 'config.yaml'
    p.write_text(content, encoding='utf-8')
    return p
