"""Use case: cycle the scrap paper through saved snapshots."""

from __future__ import annotations

import enum
import logging

from scrap_paper.l1_entities.outcome import Notice, Outcome
from scrap_paper.l1_entities.snapshot_history import SnapshotHistory
from scrap_paper.l1_entities.swap_state import SwapState
from scrap_paper.l2_use_cases.load_history_use_case import LoadHistoryUseCase
from scrap_paper.l2_use_cases.ports.blob_store import BlobStore
from scrap_paper.l2_use_cases.ports.surface_host import SurfaceHost
from scrap_paper.l2_use_cases.utils.surface_guard import in_scratch_surface

log = logging.getLogger('scrap.history')


class Direction(enum.Enum):
    OLDER = 'prev'
    NEWER = 'next'


class NavigateHistoryUseCase:
    """Moves the navigation cursor and shows the selected snapshot.

    The first OLDER step shows the newest save, the first NEWER step the
    oldest one; both wrap around. Storage is never written.
    """

    def __init__(self, host: SurfaceHost, store: BlobStore) -> None:
        self._host = host
        self._loader = LoadHistoryUseCase(store)

    def execute(self, swap: SwapState, history: SnapshotHistory, direction: Direction) -> Outcome:
        if not in_scratch_surface(self._host, swap):
            return Outcome.success(Notice.NOT_IN_SCRATCH)

        loaded = self._loader.ensure_loaded(history)
        if loaded.is_error:
            return loaded
        notes = () if loaded.ok else (loaded.message,)

        if history.size == 0:
            return Outcome.success(Notice.STORAGE_EMPTY).with_warnings(*notes)

        index = history.step_older() if direction is Direction.OLDER else history.step_newer()
        self._host.set_lines(swap.scratch_surface, list(history.snapshots[index].lines))
        log.debug('%s -> index %d of %d', direction.value, index, history.size)
        return Outcome.success(Notice.SHOWING, f'{index + 1}/{history.size}').with_warnings(*notes)
