"""Use case: toggle between the current surface and the scrap paper."""

from __future__ import annotations

import logging

from scrap_paper.l1_entities.errors import SurfaceCreationError
from scrap_paper.l1_entities.outcome import ErrorKind, Outcome
from scrap_paper.l1_entities.swap_state import SwapState
from scrap_paper.l2_use_cases.ports.surface_host import SurfaceHost
from scrap_paper.l2_use_cases.utils.surface_guard import in_scratch_surface

log = logging.getLogger('scrap.swap')


class SwapSurfaceUseCase:
    """Swaps into the scrap paper (creating it on demand) or back to the previous surface."""

    def __init__(self, host: SurfaceHost, surface_name: str) -> None:
        self._host = host
        self._surface_name = surface_name

    def execute(self, state: SwapState) -> Outcome:
        if in_scratch_surface(self._host, state):
            return self._swap_out(state)

        state.previous_surface = self._host.active_surface()
        if state.scratch_surface is None:
            try:
                handle = self._host.create_surface(self._surface_name)
            except SurfaceCreationError as e:
                log.error('Unable to create scrap paper surface: %s', e)
                return Outcome.fail(ErrorKind.SURFACE_CREATION_FAILED, f'Unable to create scrap paper: {e}')
            state.scratch_surface = handle
            self._host.on_destroy(handle, lambda: state.forget_scratch(handle))
            log.debug('Created scrap paper surface %s', handle)

        self._host.activate(state.scratch_surface)
        log.debug('Swapped in: %s -> %s', state.previous_surface, state.scratch_surface)
        return Outcome.success()

    def _swap_out(self, state: SwapState) -> Outcome:
        previous = state.previous_surface
        if previous is None or not self._host.is_valid(previous):
            log.warning('Previous surface %s is gone; staying in scrap paper', previous)
            return Outcome.warn(
                ErrorKind.PREVIOUS_SURFACE_UNAVAILABLE,
                'Unable to switch to previous surface.',
            )
        self._host.activate(previous)
        log.debug('Swapped out: %s -> %s', state.scratch_surface, previous)
        return Outcome.success()
