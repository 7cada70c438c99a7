"""Configuration constants and .env loading.

WHY: The SVGO command, its timeout, the default optimizer and the API
bind address differ between machines (global ``svgo`` vs ``npx svgo``,
CI vs laptop). Keeping them in one module makes them easy to find and
override without touching logic.

HOW: python-dotenv loads the .env file on import. Values are module-level
constants read from the environment with sensible defaults.
load_svgo_command() turns the configured command string into an argv list.

RULES:
- All defaults can be overridden via environment variables
- The payload envelope is NOT configurable (it is a wire format)
- SUPPORTED_EXTENSIONS lists files the CLI will read (lowercase, with dot)
"""

from __future__ import annotations

import os
import shlex
from typing import List

from dotenv import load_dotenv

# Load .env from the directory the tool is run from
load_dotenv()

# ---------------------------------------------------------------------------
# Optimizer settings
# ---------------------------------------------------------------------------

SVGO_COMMAND = os.getenv("BETTER_SVG_SVGO_COMMAND", "svgo")
SVGO_TIMEOUT_S = float(os.getenv("BETTER_SVG_SVGO_TIMEOUT", "30"))
SVGO_MULTIPASS = os.getenv("BETTER_SVG_SVGO_MULTIPASS", "true").lower() == "true"
DEFAULT_OPTIMIZER = os.getenv("BETTER_SVG_DEFAULT_OPTIMIZER", "svgo")

# ---------------------------------------------------------------------------
# Logging and HTTP API
# ---------------------------------------------------------------------------

LOG_LEVEL = os.getenv("BETTER_SVG_LOG_LEVEL", "WARNING").upper()
API_HOST = os.getenv("BETTER_SVG_API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("BETTER_SVG_API_PORT", "8000"))

# ---------------------------------------------------------------------------
# Files the CLI accepts
# ---------------------------------------------------------------------------

SUPPORTED_EXTENSIONS: set[str] = {
    ".svg", ".jsx", ".tsx", ".js", ".ts", ".html", ".vue", ".astro",
}
"""Files that may contain SVG markup (lowercase, with dot)."""


def load_svgo_command() -> List[str]:
    """Return the configured SVGO command as an argv list.

    RULES:
    - Quoted arguments are honoured (``npx "svgo@3"``)
    - Raises ValueError if the command is empty
    """
    argv = shlex.split(SVGO_COMMAND)
    if not argv:
        raise ValueError(
            "SVGO command not configured. "
            "Set BETTER_SVG_SVGO_COMMAND in the .env file."
        )
    return argv
