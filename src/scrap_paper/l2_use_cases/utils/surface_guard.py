"""Shared check: is the user currently in the scrap paper?"""

from __future__ import annotations

from scrap_paper.l1_entities.swap_state import SwapState
from scrap_paper.l2_use_cases.ports.surface_host import SurfaceHost


def in_scratch_surface(host: SurfaceHost, swap: SwapState) -> bool:
    return swap.scratch_surface is not None and host.active_surface() == swap.scratch_surface
