"""SVGO optimizer backend driven over stdin/stdout.

WHY: SVGO is the de-facto SVG optimizer, but it is a Node.js tool with
no Python API. Running its CLI as a subprocess keeps it a true black box
and lets users point at any install (global, ``npx``, a pinned version).

HOW: The configured command gets ``--input - --output -`` (and
``--multipass`` when enabled) appended, the SVG is written to stdin and
the optimized markup is read from stdout. Exit status, a missing
executable and timeouts map to OptimizerError subclasses.

RULES:
- Text is exchanged as UTF-8 in both directions
- Non-zero exit → OptimizerError with the exit code and stderr
- Missing executable → OptimizerNotFoundError
- Exceeding the timeout → OptimizerTimeoutError (process is killed)
"""

from __future__ import annotations

import logging
import subprocess
from typing import List, Optional

from better_svg import config
from better_svg.optimizers.base import (
    BaseOptimizer,
    OptimizerError,
    OptimizerNotFoundError,
    OptimizerTimeoutError,
)

logger = logging.getLogger(__name__)


class SvgoOptimizer(BaseOptimizer):
    """Pipe SVG through the SVGO command-line tool."""

    def __init__(
        self,
        command: Optional[List[str]] = None,
        multipass: Optional[bool] = None,
        timeout_s: Optional[float] = None,
    ) -> None:
        self.command = command if command is not None else config.load_svgo_command()
        self.multipass = config.SVGO_MULTIPASS if multipass is None else multipass
        self.timeout_s = config.SVGO_TIMEOUT_S if timeout_s is None else timeout_s

    @property
    def name(self) -> str:
        return "SVGO"

    def build_argv(self) -> List[str]:
        """Full argv for one run: the command plus stdin/stdout flags."""
        argv = list(self.command) + ["--input", "-", "--output", "-"]
        if self.multipass:
            argv.append("--multipass")
        return argv

    def optimize(self, svg: str) -> str:
        argv = self.build_argv()
        logger.debug("Running %s", " ".join(argv))

        try:
            completed = subprocess.run(
                argv,
                input=svg,
                capture_output=True,
                text=True,
                encoding="utf-8",
                timeout=self.timeout_s,
                check=False,
            )
        except FileNotFoundError as exc:
            raise OptimizerNotFoundError(
                "SVGO executable not found: {}. Install it with "
                "'npm install -g svgo' or set BETTER_SVG_SVGO_COMMAND.".format(argv[0])
            ) from exc
        except subprocess.TimeoutExpired as exc:
            raise OptimizerTimeoutError(
                "SVGO did not finish within {:.0f}s".format(self.timeout_s)
            ) from exc

        if completed.returncode != 0:
            stderr = (completed.stderr or "").strip()
            logger.warning("SVGO exited with code %d: %s", completed.returncode, stderr)
            raise OptimizerError(
                "SVGO failed with exit code {}".format(completed.returncode),
                returncode=completed.returncode,
                stderr=stderr,
            )

        return completed.stdout
