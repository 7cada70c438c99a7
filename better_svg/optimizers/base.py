"""Abstract base optimizer and optimizer errors.

WHY: The bridge treats the optimizer as a black box: plain SVG in, plain
SVG out. A small base class gives the CLI and HTTP API one interface for
any backend (SVGO today, a stub in tests) and lets instances be passed
straight to optimize_with() as a plain callable.

HOW: BaseOptimizer is an ABC with a ``name`` property and an
``optimize()`` method; ``__call__`` forwards to ``optimize()``.
Failures are reported with OptimizerError and its subclasses.

RULES:
- Subclasses MUST implement ``name`` and ``optimize()``
- ``optimize()`` must keep unknown attributes and their values verbatim
- Errors carry the process return code and stderr when there is one
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class OptimizerError(Exception):
    """Raised when an optimizer cannot produce output.

    WHY: Callers need a typed exception to tell optimizer failures apart
    from bugs in the transcoder or bad input files.

    RULES:
    - ``returncode`` is None when the process never ran or was killed
    - ``stderr`` is the optimizer's diagnostic text, possibly empty
    """

    def __init__(
        self,
        message: str,
        returncode: Optional[int] = None,
        stderr: str = "",
    ) -> None:
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)


class OptimizerNotFoundError(OptimizerError):
    """Raised when the optimizer executable is not installed or not on PATH."""


class OptimizerTimeoutError(OptimizerError, TimeoutError):
    """Raised when the optimizer runs longer than the configured timeout."""


class BaseOptimizer(ABC):
    """Abstract base for all SVG optimizers.

    To add a new optimizer:
    1. Create a new file in optimizers/
    2. Subclass BaseOptimizer
    3. Implement optimize() and name
    4. Register in OPTIMIZERS dict in optimizers/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable optimizer name, e.g. 'SVGO'."""

    @abstractmethod
    def optimize(self, svg: str) -> str:
        """Optimize plain SVG markup.

        Args:
            svg: Standard SVG text, possibly holding placeholder attributes
                 produced by the transcoder.

        Returns:
            Optimized SVG text.

        Raises:
            OptimizerError: If the optimizer could not run or failed.
        """

    def __call__(self, svg: str) -> str:
        return self.optimize(svg)
