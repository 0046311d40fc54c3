"""Serialization of the snapshot history blob: a JSON list of lists of lines."""

from __future__ import annotations

from pydantic import TypeAdapter, ValidationError

from scrap_paper.l1_entities.errors import MalformedStorageError
from scrap_paper.l1_entities.snapshot import Snapshot

_BLOB_ADAPTER = TypeAdapter(list[list[str]])


def decode_snapshots(blob: bytes) -> list[Snapshot]:
    """Parse *blob* into snapshots, newest first. ``[]`` is an empty history."""
    try:
        raw = _BLOB_ADAPTER.validate_json(blob)
    except ValidationError as e:
        raise MalformedStorageError(f'Malformed snapshot storage: {e.error_count()} error(s)') from e
    return [Snapshot.from_lines(lines) for lines in raw]


def encode_snapshots(snapshots: list[Snapshot]) -> bytes:
    return _BLOB_ADAPTER.dump_json([list(s.lines) for s in snapshots])
