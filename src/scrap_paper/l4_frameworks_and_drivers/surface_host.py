"""TextualSurfaceHost — SurfaceHost port backed by TextArea widgets in a ContentSwitcher."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from textual.widget import MountError
from textual.widgets import ContentSwitcher, TextArea

from scrap_paper.l1_entities.errors import SurfaceCreationError

log = logging.getLogger('scrap.app')

DOCUMENT_SURFACE = 'document'


class TextualSurfaceHost:
    """Each surface is a TextArea child of one ContentSwitcher; the handle is the widget id."""

    def __init__(self) -> None:
        self._switcher: ContentSwitcher | None = None
        self._surfaces: dict[str, TextArea] = {}
        self._destroy_callbacks: dict[str, list[Callable[[], None]]] = {}
        self._created = 0

    def attach(self, switcher: ContentSwitcher, *surfaces: TextArea) -> None:
        """Adopt *switcher* and the surfaces composed into it."""
        self._switcher = switcher
        for surface in surfaces:
            self._surfaces[surface.id] = surface

    def create_surface(self, name: str) -> str:
        if self._switcher is None:
            raise SurfaceCreationError('surface host is not attached to a screen')
        self._created += 1
        handle = f'scratch-{self._created}'
        surface = TextArea(id=handle)
        surface.border_title = name
        try:
            self._switcher.mount(surface)
        except MountError as e:
            raise SurfaceCreationError(str(e)) from e
        self._surfaces[handle] = surface
        return handle

    def get_lines(self, handle: str) -> list[str]:
        return self._surfaces[handle].text.split('\n')

    def set_lines(self, handle: str, lines: Sequence[str]) -> None:
        self._surfaces[handle].load_text('\n'.join(lines))

    def active_surface(self) -> str | None:
        if self._switcher is None:
            return None
        return self._switcher.current

    def activate(self, handle: str) -> None:
        self._switcher.current = handle
        self._surfaces[handle].focus()

    def is_valid(self, handle: str) -> bool:
        return handle in self._surfaces

    def on_destroy(self, handle: str, callback: Callable[[], None]) -> None:
        self._destroy_callbacks.setdefault(handle, []).append(callback)

    def destroy(self, handle: str) -> None:
        """Remove a surface, fall back to the document, and fire its on-destroy callbacks."""
        surface = self._surfaces.pop(handle)
        if self._switcher.current == handle:
            self.activate(DOCUMENT_SURFACE)
        surface.remove()
        for callback in self._destroy_callbacks.pop(handle, []):
            callback()
        log.debug('Destroyed surface %s', handle)
