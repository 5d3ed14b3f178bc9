"""Named case presets: TOGGLE, ALTERNATING and (optionally) RANDOM.

WHY: Callers want to say "convert this to toggle case" without knowing that
toggle case means "split on spaces, apply the toggle pattern, join with a
space". A preset bundles those three choices into one importable constant,
and CASES lets the CLI select one by name.

HOW: Case is a frozen dataclass of (boundaries, pattern, delimiter). The
presets are module-level constants; the RANDOM preset and its "random"
registry entry are only defined when config.RANDOM_ENABLED was true at
import time.

RULES:
- Presets are frozen constants — never mutate them at runtime.
- Every preset here splits on SPACE and joins with a single space.
- Without the random capability, ``case.RANDOM`` raises AttributeError.
- get_case() is the only lookup that raises ValueError for unknown names.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Optional, Sequence, Tuple

from case_extras import config
from case_extras.boundary import Boundary
from case_extras.pattern import Pattern

if TYPE_CHECKING:
    import random


@dataclass(frozen=True)
class Case:
    """A casing convention: how to split, how to recase, how to rejoin.

    Attributes:
        boundaries: Boundaries used to split a string written in this case.
        pattern: Casing pattern applied to the split words.
        delimiter: String placed between words when joining.
    """

    boundaries: Tuple[Boundary, ...]
    pattern: Pattern
    delimiter: str

    def mutate(self, words: Sequence[str], rng: Optional[random.Random] = None) -> List[str]:
        """Apply this preset's pattern to ``words``."""
        return self.pattern.mutate(words, rng)

    def join(self, words: Sequence[str]) -> str:
        """Join ``words`` with this preset's delimiter."""
        return self.delimiter.join(words)


# Toggle case: "mY vARIABLE nAME"
TOGGLE = Case(
    boundaries=(Boundary.SPACE,),
    pattern=Pattern.TOGGLE,
    delimiter=" ",
)

# Alternating case: "mY vArIaBlE nAmE"
ALTERNATING = Case(
    boundaries=(Boundary.SPACE,),
    pattern=Pattern.ALTERNATING,
    delimiter=" ",
)

# Preset lookup by name
CASES: Dict[str, Case] = {
    "toggle": TOGGLE,
    "alternating": ALTERNATING,
}

if config.RANDOM_ENABLED:
    # Random case: "My vaRIAbLE nAme"
    RANDOM = Case(
        boundaries=(Boundary.SPACE,),
        pattern=Pattern.RANDOM,
        delimiter=" ",
    )
    CASES["random"] = RANDOM


def __getattr__(name: str) -> Case:
    if name == "RANDOM":
        raise AttributeError(
            "case_extras.case.RANDOM is unavailable: the random capability is "
            "disabled (set CASE_EXTRAS_RANDOM=true)"
        )
    raise AttributeError("module {!r} has no attribute {!r}".format(__name__, name))


def get_case(name: str) -> Case:
    """Resolve a preset name to its Case.

    Raises:
        ValueError: If ``name`` is not a registered preset.
    """
    key = name.strip().lower()
    if key not in CASES:
        raise ValueError(
            "Unknown case '{}'. Available: {}".format(name, ", ".join(CASES.keys()))
        )
    return CASES[key]
