"""Outcome entity — tagged result of every scrap paper operation."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace


class Severity(enum.Enum):
    OK = 'ok'
    WARNING = 'warning'
    ERROR = 'error'


class Notice(enum.Enum):
    """Informational outcomes; the value is the user-facing message."""

    SAVED = 'Scrap paper saved.'
    EMPTY_NOT_SAVED = 'Empty scrap paper, not saving.'
    ALREADY_SAVED = 'Already saved!'
    STORAGE_EMPTY = 'Storage is empty'
    NOT_IN_SCRATCH = ''
    SHOWING = 'Saved scrap paper'


class ErrorKind(enum.Enum):
    STORAGE_UNREADABLE = 'storage_unreadable'
    STORAGE_UNWRITABLE = 'storage_unwritable'
    MALFORMED_STORAGE = 'malformed_storage'
    SURFACE_CREATION_FAILED = 'surface_creation_failed'
    PREVIOUS_SURFACE_UNAVAILABLE = 'previous_surface_unavailable'
    UNKNOWN_COMMAND = 'unknown_command'


@dataclass(frozen=True)
class Outcome:
    """Result of an operation — success with an optional notice, a warning, or an error."""

    severity: Severity = Severity.OK
    notice: Notice | None = None
    kind: ErrorKind | None = None
    detail: str = ''
    warnings: tuple[str, ...] = ()

    @classmethod
    def success(cls, notice: Notice | None = None, detail: str = '') -> Outcome:
        return cls(notice=notice, detail=detail)

    @classmethod
    def warn(cls, kind: ErrorKind, detail: str) -> Outcome:
        return cls(severity=Severity.WARNING, kind=kind, detail=detail)

    @classmethod
    def fail(cls, kind: ErrorKind, detail: str) -> Outcome:
        return cls(severity=Severity.ERROR, kind=kind, detail=detail)

    def with_warnings(self, *messages: str) -> Outcome:
        """Attach non-fatal problems met on the way, such as an unreadable storage file."""
        if not messages:
            return self
        return replace(self, warnings=self.warnings + messages)

    @property
    def ok(self) -> bool:
        return self.severity is Severity.OK

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def message(self) -> str:
        """User-facing text; empty for silent outcomes."""
        if self.notice is None:
            return self.detail
        if self.notice.value and self.detail:
            return f'{self.notice.value} {self.detail}'
        return self.notice.value
