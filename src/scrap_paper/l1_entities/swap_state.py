"""Swap state entity — which surface is the scrap paper, and where we came from."""

from __future__ import annotations

from pydantic import BaseModel


class SwapState(BaseModel):
    scratch_surface: str | None = None
    previous_surface: str | None = None

    def forget_scratch(self, handle: str) -> None:
        """Clear the scrap paper handle once its surface is destroyed."""
        if self.scratch_surface == handle:
            self.scratch_surface = None
