"""Identity optimizer.

WHY: Lets users check what the JSX round trip alone does to a file, and
lets the CLI and HTTP API run where SVGO is not installed.
"""

from __future__ import annotations

from better_svg.optimizers.base import BaseOptimizer


class PassthroughOptimizer(BaseOptimizer):
    """Return the SVG unchanged."""

    @property
    def name(self) -> str:
        return "Passthrough"

    def optimize(self, svg: str) -> str:
        return svg
