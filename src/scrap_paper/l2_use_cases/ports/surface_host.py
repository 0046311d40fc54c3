"""Port: host text surface — the editor region the scrap paper lives in."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Protocol


class SurfaceHost(Protocol):
    """Abstract host that owns editable text regions identified by opaque handles."""

    def create_surface(self, name: str) -> str:
        """Create a non-file-backed editable region. Raises SurfaceCreationError when refused."""
        ...

    def get_lines(self, handle: str) -> list[str]:
        """Return the full ordered line content of a region."""
        ...

    def set_lines(self, handle: str, lines: Sequence[str]) -> None:
        """Replace the full line content of a region."""
        ...

    def active_surface(self) -> str | None:
        """Handle of the region the user is currently in."""
        ...

    def activate(self, handle: str) -> None:
        ...

    def is_valid(self, handle: str) -> bool:
        """Whether *handle* still refers to a live region."""
        ...

    def on_destroy(self, handle: str, callback: Callable[[], None]) -> None:
        """Register *callback* to run when the region is destroyed by any means."""
        ...
