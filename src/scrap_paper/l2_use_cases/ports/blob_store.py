"""Port: persistent blob storage for the snapshot history."""

from __future__ import annotations

from typing import Protocol


class BlobStore(Protocol):
    """A single opaque blob under a fixed key."""

    def read(self) -> bytes:
        """Return the stored blob. Raises OSError when missing or unreadable."""
        ...

    def write(self, data: bytes) -> None:
        """Replace the stored blob atomically. Raises OSError on failure."""
        ...
