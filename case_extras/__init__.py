"""Extra string casing conventions: toggle, alternating and random case.

WHY: Common case conversions (snake, camel, kebab) cover identifiers, but
playful or stylised text needs casing rules that work per character:
"tOGGLE cASE", "aLtErNaTiNg CaSe" and "RaNdOM cAsE". This package supplies
those patterns and wraps each one in a ready-to-use case preset.

HOW: The public entry point is to_case(text, case). It splits the text into
words, applies the preset's pattern and rejoins with the preset's delimiter.
Patterns (pattern.py) operate on word lists; presets (case.py) bundle a
pattern with boundaries and a delimiter; boundary.py does the splitting.

RULES:
- to_case() is the public API for producing converted strings.
- Presets: TOGGLE, ALTERNATING, and RANDOM when the random capability is on.
- Nothing here keeps state between calls; every function is reentrant.
- Python 3.9 compatible (no match/case, no X | Y unions at runtime).
"""

from case_extras import config
from case_extras.boundary import DEFAULT_BOUNDARIES, Boundary, split
from case_extras.case import ALTERNATING, CASES, TOGGLE, Case, get_case
from case_extras.converter import is_case, to_case
from case_extras.pattern import Pattern, alternating, toggle, toggle_word

__version__ = "0.1.0"

__all__ = [
    "to_case",
    "is_case",
    "split",
    "get_case",
    "Boundary",
    "DEFAULT_BOUNDARIES",
    "Case",
    "CASES",
    "Pattern",
    "TOGGLE",
    "ALTERNATING",
    "toggle",
    "toggle_word",
    "alternating",
]

if config.RANDOM_ENABLED:
    from case_extras.case import RANDOM
    from case_extras.randomness import random_case

    __all__ += ["RANDOM", "random_case"]
