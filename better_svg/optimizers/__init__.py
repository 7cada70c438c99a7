"""Optimizer registry: pluggable SVG optimizer backends.

WHY: The CLI and HTTP API need a single lookup to find an optimizer by
name. A central dict makes adding a backend trivial: create the class,
import it here, add one line.

HOW: OPTIMIZERS maps string keys to optimizer *classes* (not instances).
get_optimizer() validates the key and instantiates it.

RULES:
- Keys are snake_case identifiers (used in CLI flags and API bodies)
- Values are BaseOptimizer subclasses (not instances)
- Every optimizer listed here must be importable without side effects
"""

from __future__ import annotations

from typing import Dict, Type

from better_svg.optimizers.base import (
    BaseOptimizer,
    OptimizerError,
    OptimizerNotFoundError,
    OptimizerTimeoutError,
)
from better_svg.optimizers.passthrough import PassthroughOptimizer
from better_svg.optimizers.svgo import SvgoOptimizer

OPTIMIZERS: Dict[str, Type[BaseOptimizer]] = {
    "svgo": SvgoOptimizer,
    "passthrough": PassthroughOptimizer,
}


def get_optimizer(key: str) -> BaseOptimizer:
    """Instantiate the optimizer registered under ``key``.

    Raises:
        ValueError: If ``key`` is not registered.
    """
    if key not in OPTIMIZERS:
        raise ValueError(
            "Unknown optimizer '{}'. Available: {}".format(
                key, ", ".join(sorted(OPTIMIZERS))
            )
        )
    return OPTIMIZERS[key]()


__all__ = [
    "OPTIMIZERS",
    "BaseOptimizer",
    "OptimizerError",
    "OptimizerNotFoundError",
    "OptimizerTimeoutError",
    "PassthroughOptimizer",
    "SvgoOptimizer",
    "get_optimizer",
]
