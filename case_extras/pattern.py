"""Word-casing patterns: toggle, alternating, and (optionally) random.

WHY: A case preset needs a rule that rewrites the casing of already-split
words before they are joined again. The set of rules this library ships is
small and fixed, so it is modelled as a closed enumeration with a single
``mutate()`` dispatch rather than open-ended callables.

HOW: Each pattern is a plain function ``List[str] -> List[str]``. The
Pattern enum maps members to those functions through _TRANSFORMS.
Pattern.RANDOM exists only when config.RANDOM_ENABLED was true at import
time; its transform lives in randomness.py so the deterministic patterns
never import a random-number facility.

RULES:
- Patterns never change the number of words.
- Characters without a case (digits, punctuation, CJK) pass through as-is.
- Toggle is per-word; alternating threads one flag across all words of a
  single call and restarts on every call.
- All functions are total: empty lists and empty words are valid input.
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Sequence, Tuple

from case_extras import config
from case_extras.text import has_case

if TYPE_CHECKING:
    import random


# =============================================================================
# Toggle
# =============================================================================

def toggle_word(word: str) -> str:
    """Lowercase the first character of ``word`` and uppercase the rest.

    The first character is lowercased whatever it is; for a digit or
    punctuation mark that is simply a no-op.

    >>> toggle_word("Case")
    'cASE'
    """
    return word[:1].lower() + word[1:].upper()


def toggle(words: Sequence[str]) -> List[str]:
    """Apply toggle_word() to every word independently."""
    return [toggle_word(word) for word in words]


# =============================================================================
# Alternating
# =============================================================================

def _alternate_word(word: str, upper: bool) -> Tuple[str, bool]:
    """Alternate the casing of one word starting from ``upper``.

    Returns the rewritten word and the flag to continue with, so the caller
    can carry the phase into the next word.
    """
    letters: List[str] = []
    for letter in word:
        if has_case(letter):
            letters.append(letter.upper() if upper else letter.lower())
            upper = not upper
        else:
            letters.append(letter)
    return "".join(letters), upper


def alternating(words: Sequence[str]) -> List[str]:
    """Alternate lower/upper casing across the whole word sequence.

    WHY: "mY vArIaBlE" style text reads as one continuous alternation, so
    the phase must not restart at every word.

    HOW: Walks words left to right, threading the "next letter is upper"
    flag through _alternate_word(). The flag starts False (lowercase first)
    and is local to this call.

    RULES:
    - Only cased characters flip the flag.
    - The last cased letter of one word and the first of the next always
      differ in case.

    >>> alternating(["Another", "Example"])
    ['aNoThEr', 'ExAmPlE']
    """
    upper = False
    out: List[str] = []
    for word in words:
        mutated, upper = _alternate_word(word, upper)
        out.append(mutated)
    return out


# =============================================================================
# Pattern enumeration
# =============================================================================

class Pattern(enum.Enum):
    """The closed set of casing patterns available to case presets."""

    TOGGLE = "toggle"
    ALTERNATING = "alternating"
    if config.RANDOM_ENABLED:
        RANDOM = "random"

    @property
    def is_random(self) -> bool:
        """True for patterns whose output depends on a random source."""
        return self.value == "random"

    def mutate(self, words: Sequence[str], rng: Optional[random.Random] = None) -> List[str]:
        """Apply this pattern to ``words`` and return the new word list.

        Args:
            words: Words already split from the source string.
            rng: Optional ``random.Random`` used by the random pattern for
                 reproducible output. Ignored by deterministic patterns.

        Returns:
            A new list with the same number of words.
        """
        transform = _TRANSFORMS[self]
        if self.is_random:
            return transform(words, rng)
        return transform(words)


_TRANSFORMS: Dict[Pattern, Callable[..., List[str]]] = {
    Pattern.TOGGLE: toggle,
    Pattern.ALTERNATING: alternating,
}

if config.RANDOM_ENABLED:
    from case_extras.randomness import random_case

    _TRANSFORMS[Pattern.RANDOM] = random_case
