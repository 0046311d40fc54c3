"""Use case: save the scrap paper content at the head of the history."""

from __future__ import annotations

import logging

from scrap_paper.l1_entities.outcome import ErrorKind, Notice, Outcome
from scrap_paper.l1_entities.snapshot import Snapshot
from scrap_paper.l1_entities.snapshot_history import SnapshotHistory
from scrap_paper.l1_entities.swap_state import SwapState
from scrap_paper.l2_use_cases.load_history_use_case import LoadHistoryUseCase
from scrap_paper.l2_use_cases.ports.blob_store import BlobStore
from scrap_paper.l2_use_cases.ports.surface_host import SurfaceHost
from scrap_paper.l2_use_cases.utils.snapshot_codec import encode_snapshots
from scrap_paper.l2_use_cases.utils.surface_guard import in_scratch_surface

log = logging.getLogger('scrap.history')


class SaveSnapshotUseCase:
    """Pushes the current scrap paper onto the MRU history and persists it."""

    def __init__(self, host: SurfaceHost, store: BlobStore, max_capacity: int) -> None:
        self._host = host
        self._store = store
        self._loader = LoadHistoryUseCase(store)
        self.max_capacity = max_capacity

    def execute(self, swap: SwapState, history: SnapshotHistory) -> Outcome:
        if not in_scratch_surface(self._host, swap):
            return Outcome.success(Notice.NOT_IN_SCRATCH)

        snapshot = Snapshot.from_lines(self._host.get_lines(swap.scratch_surface))
        if snapshot.is_blank:
            return Outcome.success(Notice.EMPTY_NOT_SAVED)

        loaded = self._loader.ensure_loaded(history)
        if loaded.is_error:
            return loaded
        notes = () if loaded.ok else (loaded.message,)

        if not history.push(snapshot, self.max_capacity):
            return Outcome.success(Notice.ALREADY_SAVED).with_warnings(*notes)

        try:
            self._store.write(encode_snapshots(history.snapshots))
        except OSError as e:
            log.error('Unable to write to storage: %s', e)
            outcome = Outcome.fail(ErrorKind.STORAGE_UNWRITABLE, f'Unable to write to storage: {e}')
            return outcome.with_warnings(*notes)

        log.info('Saved scrap paper (%d lines), history size %d', len(snapshot.lines), history.size)
        return Outcome.success(Notice.SAVED).with_warnings(*notes)
