"""Random casing pattern (optional "random" capability).

WHY: Random case ("My vaRIAbLE nAme") is the one pattern with external
nondeterminism. Keeping it in its own module means the deterministic
patterns and presets never import the ``random`` module; pattern.py only
imports this module when config.RANDOM_ENABLED is set.

HOW: Every cased character independently becomes uppercase when
``rng.random() > 0.5`` and lowercase otherwise. Callers that need
reproducible output pass their own seeded ``random.Random``.

RULES:
- Without an explicit rng a fresh ``random.Random()`` is created per call,
  so no generator is ever shared between threads.
- Uncased characters pass through untouched and consume no draw.
"""

from __future__ import annotations

import random
from typing import List, Optional, Sequence

from case_extras.text import has_case


def _random_word(word: str, rng: random.Random) -> str:
    letters: List[str] = []
    for letter in word:
        if has_case(letter):
            letters.append(letter.upper() if rng.random() > 0.5 else letter.lower())
        else:
            letters.append(letter)
    return "".join(letters)


def random_case(words: Sequence[str], rng: Optional[random.Random] = None) -> List[str]:
    """Uppercase or lowercase each letter of each word uniformly at random.

    Args:
        words: Words already split from the source string.
        rng: Seeded generator for deterministic output. A fresh unseeded
             generator is used when omitted.

    Returns:
        A new list with the same number of words and characters per word.
    """
    if rng is None:
        rng = random.Random()
    return [_random_word(word, rng) for word in words]
