"""Snapshot entity — exact scrap paper content at save time."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel


class Snapshot(BaseModel):
    """An immutable ordered sequence of lines, empty lines included."""

    lines: tuple[str, ...]

    model_config = {'frozen': True}

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> Snapshot:
        return cls(lines=tuple(lines))

    @property
    def is_blank(self) -> bool:
        """A single empty line (or nothing at all) counts as blank."""
        return len(self.lines) < 2 and not any(self.lines)
