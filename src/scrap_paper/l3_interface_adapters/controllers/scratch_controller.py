"""ScratchController — owns swap/history state and dispatches the four scrap paper commands."""

from __future__ import annotations

import logging

from scrap_paper.l1_entities.config import AppConfig
from scrap_paper.l1_entities.outcome import ErrorKind, Outcome, Severity
from scrap_paper.l1_entities.snapshot_history import SnapshotHistory
from scrap_paper.l1_entities.swap_state import SwapState
from scrap_paper.l2_use_cases.load_history_use_case import LoadHistoryUseCase
from scrap_paper.l2_use_cases.navigate_history_use_case import Direction, NavigateHistoryUseCase
from scrap_paper.l2_use_cases.ports.blob_store import BlobStore
from scrap_paper.l2_use_cases.ports.surface_host import SurfaceHost
from scrap_paper.l2_use_cases.save_snapshot_use_case import SaveSnapshotUseCase
from scrap_paper.l2_use_cases.swap_use_case import SwapSurfaceUseCase

log = logging.getLogger('scrap.controller')

COMMANDS = ('swap', 'save', 'prev', 'next')

_LOG_LEVELS = {
    Severity.OK: logging.DEBUG,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}


class ScratchController:
    """Session object bridging the front end to the use cases.

    One controller per host. It owns the SwapState and SnapshotHistory, so
    independent controllers never share surfaces, history or cursor.
    """

    def __init__(self, config: AppConfig, host: SurfaceHost, store: BlobStore) -> None:
        self.swap_state = SwapState()
        self.history = SnapshotHistory()

        self._swap_uc = SwapSurfaceUseCase(host, config.scratch.surface_name)
        self._load_uc = LoadHistoryUseCase(store)
        self._save_uc = SaveSnapshotUseCase(host, store, config.history.max_capacity)
        self._navigate_uc = NavigateHistoryUseCase(host, store)

    @property
    def max_capacity(self) -> int:
        return self._save_uc.max_capacity

    @max_capacity.setter
    def max_capacity(self, value: int) -> None:
        """Takes effect on the next save; existing entries are only ever trimmed."""
        if value < 1:
            raise ValueError(f'max_capacity must be positive, got {value}')
        self._save_uc.max_capacity = value

    def dispatch(self, command: str) -> Outcome:
        """Run a command by name. Unknown names are rejected without touching any state."""
        name = command.strip()
        if name not in COMMANDS:
            outcome = Outcome.fail(ErrorKind.UNKNOWN_COMMAND, f'Unknown scrap paper command: {name}')
            return self._report(name, outcome)
        return getattr(self, name)()

    def swap(self) -> Outcome:
        return self._report('swap', self._swap_uc.execute(self.swap_state))

    def save(self) -> Outcome:
        return self._report('save', self._save_uc.execute(self.swap_state, self.history))

    def prev(self) -> Outcome:
        return self._report('prev', self._navigate_uc.execute(self.swap_state, self.history, Direction.OLDER))

    def next(self) -> Outcome:
        return self._report('next', self._navigate_uc.execute(self.swap_state, self.history, Direction.NEWER))

    def load(self) -> Outcome:
        return self._report('load', self._load_uc.execute(self.history))

    @staticmethod
    def _report(command: str, outcome: Outcome) -> Outcome:
        log.log(
            _LOG_LEVELS[outcome.severity],
            '%s -> %s %s',
            command,
            outcome.severity.value,
            outcome.message or (outcome.notice.name if outcome.notice else ''),
        )
        return outcome
