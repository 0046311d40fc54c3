"""ScratchApp — TUI hosting a document view and the scrap paper surface."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError
from textual.app import App as TextualApp
from textual.app import ComposeResult
from textual.binding import Binding
from textual.suggester import SuggestFromList
from textual.widgets import ContentSwitcher, Input, Static, TextArea

from scrap_paper.l1_entities.config import AppConfig
from scrap_paper.l1_entities.errors import InvalidConfigError
from scrap_paper.l1_entities.outcome import Outcome, Severity
from scrap_paper.l2_use_cases.ports.blob_store import BlobStore
from scrap_paper.l2_use_cases.utils.surface_guard import in_scratch_surface
from scrap_paper.l3_interface_adapters.controllers.scratch_controller import COMMANDS, ScratchController
from scrap_paper.l4_frameworks_and_drivers.config import build_app_config
from scrap_paper.l4_frameworks_and_drivers.container import DependencyContainer
from scrap_paper.l4_frameworks_and_drivers.surface_host import DOCUMENT_SURFACE, TextualSurfaceHost
from scrap_paper.l4_frameworks_and_drivers.widgets.status_bar import StatusBar

log = logging.getLogger('scrap.app')

_NOTIFY_SEVERITY = {
    Severity.OK: 'information',
    Severity.WARNING: 'warning',
    Severity.ERROR: 'error',
}


class ScratchApp(TextualApp):
    """Read-only document view plus a swappable scrap paper with saved history."""

    CSS = """
    #header {
        dock: top;
        height: 1;
        background: $primary;
        color: $text;
        padding: 0 1;
    }

    #surfaces {
        height: 1fr;
    }

    #command-input {
        dock: bottom;
        margin-bottom: 1;
    }
    """

    BINDINGS = [
        Binding('f2', "command('swap')", 'Swap', priority=True),
        Binding('f3', "command('save')", 'Save', priority=True),
        Binding('f4', "command('prev')", 'Prev', priority=True),
        Binding('f5', "command('next')", 'Next', priority=True),
        Binding('ctrl+g', 'focus_command', 'Command', priority=True),
        Binding('ctrl+w', 'close_scratch', 'Close', show=False, priority=True),
        Binding('ctrl+r', 'reload_config', 'Reload config', show=False, priority=True),
        Binding('ctrl+q', 'quit', 'Quit', priority=True),
    ]

    def __init__(
        self,
        config: AppConfig,
        document_path: Path | None = None,
        document_text: str = '',
        blob_store: BlobStore | None = None,
        config_path: str | None = None,
        overrides: dict | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._config = config
        self._document_path = document_path
        self._document_text = document_text
        self._config_path = config_path
        self._overrides = overrides
        self.surface_host = TextualSurfaceHost()
        container = DependencyContainer(config, self.surface_host, blob_store=blob_store)
        self._controller: ScratchController = container.controller

    @property
    def controller(self) -> ScratchController:
        return self._controller

    def _document_name(self) -> str:
        return self._document_path.name if self._document_path else '[No Name]'

    def compose(self) -> ComposeResult:
        yield Static(f'  scrap-paper | {self._document_name()}', id='header')
        document = TextArea(self._document_text, id=DOCUMENT_SURFACE, read_only=True)
        document.border_title = self._document_name()
        with ContentSwitcher(initial=DOCUMENT_SURFACE, id='surfaces'):
            yield document
        yield Input(
            placeholder=' | '.join(COMMANDS),
            id='command-input',
            suggester=SuggestFromList(COMMANDS, case_sensitive=False),
        )
        yield StatusBar(id='status-bar')

    def on_mount(self) -> None:
        document = self.query_one(f'#{DOCUMENT_SURFACE}', TextArea)
        self.surface_host.attach(self.query_one('#surfaces', ContentSwitcher), document)
        bar = self.query_one('#status-bar', StatusBar)
        bar.keybinding_hints = r'\[F2] swap  \[F3] save  \[F4] prev  \[F5] next  \[^G] command  \[^Q] quit'
        document.focus()
        self._refresh_status()

    def action_command(self, name: str) -> None:
        log.debug('Command: %s', name)
        self._report(self._controller.dispatch(name))
        self._refresh_status()

    def action_focus_command(self) -> None:
        self.query_one('#command-input', Input).focus()

    def action_close_scratch(self) -> None:
        handle = self._controller.swap_state.scratch_surface
        if handle is None or not self.surface_host.is_valid(handle):
            self.notify('No scrap paper to close', severity='warning')
            return
        self.surface_host.destroy(handle)
        self._refresh_status()

    def action_reload_config(self) -> None:
        """Re-read the config file; a new max_capacity applies from the next save."""
        loader = DependencyContainer.config_loader()
        try:
            config = build_app_config(loader.load_raw(self._config_path, overrides=self._overrides))
        except (OSError, InvalidConfigError, ValidationError) as e:
            log.warning('Config reload failed: %s', e)
            self.notify(f'Config not reloaded: {e}', severity='error')
            return
        self._controller.max_capacity = config.history.max_capacity
        log.info('Config reloaded, max_capacity=%d', config.history.max_capacity)
        self.notify(f'Config reloaded, keeping up to {config.history.max_capacity} scrap papers')

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id != 'command-input':
            return
        text = event.value.strip().lstrip(':').lower()
        event.input.value = ''
        if text:
            self.action_command(text)
        active = self.surface_host.active_surface()
        if active is not None:
            self.surface_host.activate(active)

    def _report(self, outcome: Outcome) -> None:
        for warning in outcome.warnings:
            self.notify(warning, severity='warning')
        if outcome.message:
            self.notify(outcome.message, severity=_NOTIFY_SEVERITY[outcome.severity])

    def _refresh_status(self) -> None:
        bar = self.query_one('#status-bar', StatusBar)
        swap_state = self._controller.swap_state
        history = self._controller.history
        if in_scratch_surface(self.surface_host, swap_state):
            bar.surface_label = self._config.scratch.surface_name
            if history.cursor is not None:
                bar.history_position = f'{history.cursor + 1}/{history.size}'
            else:
                bar.history_position = ''
        else:
            bar.surface_label = self._document_name()
            bar.history_position = ''
