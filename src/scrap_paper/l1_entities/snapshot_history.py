"""Snapshot history entity — MRU list of snapshots plus the navigation cursor."""

from __future__ import annotations

from pydantic import BaseModel

from scrap_paper.l1_entities.snapshot import Snapshot


class SnapshotHistory(BaseModel):
    """Mutable in-memory state of the snapshot store.

    Index 0 is the most recently saved snapshot, the last index the least
    recently saved one. ``snapshots`` stays None until the store has been
    materialized from storage in this process.
    """

    snapshots: list[Snapshot] | None = None
    cursor: int | None = None

    @property
    def is_loaded(self) -> bool:
        return self.snapshots is not None

    @property
    def size(self) -> int:
        return len(self.snapshots or [])

    def replace(self, snapshots: list[Snapshot]) -> None:
        """Materialize the store wholesale."""
        self.snapshots = list(snapshots)

    def head(self) -> Snapshot | None:
        return self.snapshots[0] if self.snapshots else None

    def push(self, snapshot: Snapshot, max_capacity: int) -> bool:
        """Insert *snapshot* at index 0, evicting from the tail past *max_capacity*.

        Returns False (and changes nothing) when *snapshot* equals the current
        head. Only the immediate predecessor is compared.
        """
        if self.snapshots is None:
            self.snapshots = []
        if self.head() == snapshot:
            return False
        self.snapshots.insert(0, snapshot)
        del self.snapshots[max_capacity:]
        self.cursor = None
        return True

    def step_older(self) -> int:
        """Move the cursor toward older entries, wrapping to the newest."""
        last = self._last_index()
        if last == 0 or self.cursor is None or not 0 <= self.cursor < last:
            self.cursor = 0
        else:
            self.cursor += 1
        return self.cursor

    def step_newer(self) -> int:
        """Move the cursor toward newer entries, wrapping to the oldest."""
        last = self._last_index()
        if last == 0:
            self.cursor = 0
        elif self.cursor is None or not 0 < self.cursor <= last:
            self.cursor = last
        else:
            self.cursor -= 1
        return self.cursor

    def _last_index(self) -> int:
        if not self.snapshots:
            raise IndexError('cannot navigate an empty snapshot history')
        return len(self.snapshots) - 1
