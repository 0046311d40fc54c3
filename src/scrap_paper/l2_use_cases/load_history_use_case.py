"""Use case: materialize the snapshot history from storage."""

from __future__ import annotations

import logging

from scrap_paper.l1_entities.errors import MalformedStorageError
from scrap_paper.l1_entities.outcome import ErrorKind, Outcome
from scrap_paper.l1_entities.snapshot_history import SnapshotHistory
from scrap_paper.l2_use_cases.ports.blob_store import BlobStore
from scrap_paper.l2_use_cases.utils.snapshot_codec import decode_snapshots

log = logging.getLogger('scrap.history')


class LoadHistoryUseCase:
    """Reads and parses the persisted blob into a SnapshotHistory.

    An unreadable or missing blob degrades to an empty history (warning).
    A malformed blob is an error and leaves the history unmaterialized, so
    the next operation reads storage again.
    """

    def __init__(self, store: BlobStore) -> None:
        self._store = store

    def execute(self, history: SnapshotHistory) -> Outcome:
        try:
            blob = self._store.read()
        except OSError as e:
            history.replace([])
            log.warning('Error while loading saved scrap papers, using empty storage: %s', e)
            return Outcome.warn(ErrorKind.STORAGE_UNREADABLE, f'Cannot read storage, using empty history: {e}')

        try:
            snapshots = decode_snapshots(blob)
        except MalformedStorageError as e:
            log.error('%s', e)
            return Outcome.fail(ErrorKind.MALFORMED_STORAGE, str(e))

        history.replace(snapshots)
        log.info('Loaded %d saved scrap papers', len(snapshots))
        return Outcome.success()

    def ensure_loaded(self, history: SnapshotHistory) -> Outcome:
        """Load only if the history has not been materialized in this process."""
        if history.is_loaded:
            return Outcome.success()
        return self.execute(history)
