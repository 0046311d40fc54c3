"""Tests for SnapshotHistory entity — MRU insertion, eviction, and cursor stepping."""

from __future__ import annotations

import pytest

from scrap_paper.l1_entities.snapshot import Snapshot
from scrap_paper.l1_entities.snapshot_history import SnapshotHistory


def _snap(text: str) -> Snapshot:
    return Snapshot.from_lines([text])


def _history(*texts: str) -> SnapshotHistory:
    history = SnapshotHistory()
    history.replace([_snap(t) for t in texts])
    return history


class TestLoadedState:
    def test_unloaded_by_default(self):
        history = SnapshotHistory()
        assert history.is_loaded is False
        assert history.size == 0
        assert history.cursor is None

    def test_replace_materializes(self):
        history = SnapshotHistory()
        history.replace([])
        assert history.is_loaded is True
        assert history.size == 0


class TestPush:
    def test_inserts_at_head(self):
        history = _history('A')
        assert history.push(_snap('B'), max_capacity=16) is True
        assert history.snapshots == [_snap('B'), _snap('A')]

    def test_push_materializes_unloaded_history(self):
        history = SnapshotHistory()
        assert history.push(_snap('A'), max_capacity=16) is True
        assert history.snapshots == [_snap('A')]

    def test_immediate_duplicate_refused(self):
        history = _history('A', 'B')
        history.cursor = 1
        assert history.push(_snap('A'), max_capacity=16) is False
        assert history.size == 2
        assert history.cursor == 1  # unchanged on refusal

    def test_older_duplicate_allowed(self):
        history = _history('A', 'B')
        assert history.push(_snap('B'), max_capacity=16) is True
        assert history.snapshots == [_snap('B'), _snap('A'), _snap('B')]

    def test_evicts_oldest_past_capacity(self):
        history = _history(*[f'Scrap paper no: {i}' for i in range(16, 0, -1)])
        history.push(_snap('Scrap paper no: 17'), max_capacity=16)
        assert history.size == 16
        assert history.snapshots[0] == _snap('Scrap paper no: 17')
        assert history.snapshots[-1] == _snap('Scrap paper no: 2')

    def test_smaller_capacity_trims_to_exact_size(self):
        history = _history('A', 'B', 'C', 'D', 'E')
        history.push(_snap('F'), max_capacity=2)
        assert history.snapshots == [_snap('F'), _snap('A')]

    def test_capacity_never_exceeded(self):
        history = SnapshotHistory()
        for i in range(40):
            history.push(_snap(str(i)), max_capacity=5)
            assert history.size <= 5
        assert history.snapshots == [_snap(str(i)) for i in range(39, 34, -1)]

    def test_successful_push_clears_cursor(self):
        history = _history('A', 'B')
        history.cursor = 1
        history.push(_snap('C'), max_capacity=16)
        assert history.cursor is None


class TestStepOlder:
    def test_visits_every_index_then_wraps(self):
        history = _history('A', 'B', 'C', 'D')
        assert [history.step_older() for _ in range(5)] == [0, 1, 2, 3, 0]

    def test_single_entry_stays_at_zero(self):
        history = _history('only')
        assert [history.step_older() for _ in range(3)] == [0, 0, 0]

    def test_wraps_when_list_shrank(self):
        history = _history('A', 'B', 'C')
        history.cursor = 7
        assert history.step_older() == 0

    def test_empty_raises(self):
        with pytest.raises(IndexError):
            _history().step_older()


class TestStepNewer:
    def test_visits_every_index_backwards_then_wraps(self):
        history = _history('A', 'B', 'C', 'D')
        assert [history.step_newer() for _ in range(5)] == [3, 2, 1, 0, 3]

    def test_single_entry_stays_at_zero(self):
        history = _history('only')
        assert [history.step_newer() for _ in range(3)] == [0, 0, 0]

    def test_wraps_when_list_shrank(self):
        history = _history('A', 'B', 'C')
        history.cursor = 15
        assert history.step_newer() == 2

    def test_mixed_directions(self):
        history = _history('A', 'B', 'C')
        assert history.step_older() == 0
        assert history.step_older() == 1
        assert history.step_newer() == 0
        assert history.step_newer() == 2

    def test_empty_raises(self):
        with pytest.raises(IndexError):
            _history().step_newer()
