"""String-level conversion: split, apply a preset's pattern, rejoin.

WHY: Presets only describe a casing convention. Something has to run the
three steps that turn "My variable NAME" into "mY vARIABLE nAME", and
callers should not have to repeat them.

HOW: to_case() splits the input with the source case's boundaries (or
DEFAULT_BOUNDARIES when the source case is unknown), mutates the words with
the target preset's pattern and joins them with the target delimiter.
is_case() checks whether a string is already a fixed point of a preset.

RULES:
- to_case() never raises for any input string, including "".
- Splitting uses the *source* case's boundaries, not the target's; the
  target preset only contributes its pattern and delimiter.
- is_case() is undefined for random presets and raises ValueError.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from case_extras.boundary import DEFAULT_BOUNDARIES, split
from case_extras.case import Case

if TYPE_CHECKING:
    import random

logger = logging.getLogger(__name__)


def to_case(
    text: str,
    case: Case,
    from_case: Optional[Case] = None,
    rng: Optional[random.Random] = None,
) -> str:
    """Convert ``text`` to the given case preset.

    Args:
        text: Source string.
        case: Target preset, e.g. ``case_extras.TOGGLE``.
        from_case: Preset the source is written in. Its boundaries are used
                   for splitting; DEFAULT_BOUNDARIES otherwise.
        rng: Seeded ``random.Random`` for reproducible random-case output.

    Returns:
        The converted string.

    >>> from case_extras.case import TOGGLE
    >>> to_case("toggle_case_word", TOGGLE)
    'tOGGLE cASE wORD'
    """
    boundaries = from_case.boundaries if from_case is not None else DEFAULT_BOUNDARIES
    words = split(text, boundaries)
    mutated = case.mutate(words, rng)
    logger.debug(
        "Converted %d words with pattern %s", len(words), case.pattern.value,
    )
    return case.join(mutated)


def is_case(text: str, case: Case) -> bool:
    """True if converting ``text`` to ``case`` would leave it unchanged.

    Raises:
        ValueError: If ``case`` uses a random pattern.
    """
    if case.pattern.is_random:
        raise ValueError("is_case() is undefined for random case presets")
    return to_case(text, case, from_case=case) == text
