"""Configuration constants, capability switches, and .env loading.

WHY: The random casing pattern is an optional capability. Whether it is
part of the exported surface has to be decided once, before any preset
module is imported, so the deterministic patterns never depend on a
random-number facility. Keeping that switch (and the CLI defaults) in one
module makes it easy to find and override.

HOW: python-dotenv loads the .env file on import. Values are read from the
environment with plain defaults and frozen into module-level constants.
pattern.py and case.py consult RANDOM_ENABLED at import time only.

RULES:
- RANDOM_ENABLED is read once at import; flipping the environment afterwards
  has no effect on already-imported modules
- Accepted truthy values: "1", "true", "yes", "on" (case-insensitive)
- DEFAULT_CASE must name a preset registered in case.CASES
- Unknown CASE_EXTRAS_LOG_LEVEL values fall back to WARNING
- All defaults can be overridden via environment variables
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def env_flag(name: str, default: bool) -> bool:
    """Read a boolean switch from the environment.

    Unset variables fall back to ``default``; anything outside the truthy
    set counts as False.
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def resolve_log_level(raw: str, default: str = "WARNING") -> str:
    """Normalise a logging level name, falling back to ``default``.

    Unknown names would make logging.basicConfig() raise, so they are
    replaced rather than passed through.
    """
    name = raw.strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return default


# ---------------------------------------------------------------------------
# Capabilities
# ---------------------------------------------------------------------------

RANDOM_ENABLED = env_flag("CASE_EXTRAS_RANDOM", True)
"""Whether Pattern.RANDOM and the RANDOM preset are exported."""

# ---------------------------------------------------------------------------
# CLI defaults
# ---------------------------------------------------------------------------

DEFAULT_CASE = os.getenv("CASE_EXTRAS_DEFAULT_CASE", "toggle").strip().lower()
LOG_LEVEL = resolve_log_level(os.getenv("CASE_EXTRAS_LOG_LEVEL", "WARNING"))
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
