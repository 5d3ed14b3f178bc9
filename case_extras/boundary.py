"""Word boundaries and the splitter that turns a string into words.

WHY: A case preset converts *words*, so every conversion starts by cutting
the source string apart. "test_toggle", "test-toggle", "test toggle" and
"testToggle" should all yield the same two words.

HOW: Boundaries come in two kinds:
  delimiter boundaries  — SPACE, UNDERSCORE, HYPHEN: the character itself
                          separates words and is dropped;
  transition boundaries — LOWER_UPPER, ACRONYM and the four digit
                          boundaries: a split is made between two
                          characters and nothing is dropped.
split() walks the string once, flushing the current word whenever one of
the requested boundaries fires.

RULES:
- Empty words (from repeated, leading or trailing delimiters) are dropped.
- ACRONYM splits before the last capital of a run followed by a lowercase
  letter: "HTTPServer" -> "HTTP", "Server".
- DEFAULT_BOUNDARIES includes the digit boundaries: "abc1Def" -> "abc", "1",
  "Def". Pass a narrower set to keep digits attached to letters.
"""

from __future__ import annotations

import enum
from typing import Iterable, List, Optional, Tuple


class Boundary(enum.Enum):
    """Rules identifying where one word ends and the next begins."""

    SPACE = "space"
    UNDERSCORE = "underscore"
    HYPHEN = "hyphen"
    LOWER_UPPER = "lower_upper"
    ACRONYM = "acronym"
    LOWER_DIGIT = "lower_digit"
    UPPER_DIGIT = "upper_digit"
    DIGIT_LOWER = "digit_lower"
    DIGIT_UPPER = "digit_upper"

    @property
    def delimiter(self) -> Optional[str]:
        """The character consumed by a delimiter boundary, else None."""
        return _DELIMITERS.get(self)

    def splits(self, prev: str, cur: str, nxt: str) -> bool:
        """True if a transition boundary falls between ``prev`` and ``cur``.

        ``nxt`` is the character after ``cur`` ("" at end of input); only
        ACRONYM looks at it. Delimiter boundaries always return False here.
        """
        if self is Boundary.LOWER_UPPER:
            return prev.islower() and cur.isupper()
        if self is Boundary.ACRONYM:
            return prev.isupper() and cur.isupper() and nxt.islower()
        if self is Boundary.LOWER_DIGIT:
            return prev.islower() and cur.isdigit()
        if self is Boundary.UPPER_DIGIT:
            return prev.isupper() and cur.isdigit()
        if self is Boundary.DIGIT_LOWER:
            return prev.isdigit() and cur.islower()
        if self is Boundary.DIGIT_UPPER:
            return prev.isdigit() and cur.isupper()
        return False


_DELIMITERS = {
    Boundary.SPACE: " ",
    Boundary.UNDERSCORE: "_",
    Boundary.HYPHEN: "-",
}

DIGIT_BOUNDARIES: Tuple[Boundary, ...] = (
    Boundary.LOWER_DIGIT,
    Boundary.UPPER_DIGIT,
    Boundary.DIGIT_LOWER,
    Boundary.DIGIT_UPPER,
)

DEFAULT_BOUNDARIES: Tuple[Boundary, ...] = (
    Boundary.UNDERSCORE,
    Boundary.HYPHEN,
    Boundary.SPACE,
    Boundary.LOWER_UPPER,
    Boundary.ACRONYM,
) + DIGIT_BOUNDARIES


def split(text: str, boundaries: Iterable[Boundary] = DEFAULT_BOUNDARIES) -> List[str]:
    """Split ``text`` into words at the given boundaries.

    Args:
        text: Source string.
        boundaries: Boundary rules to honour. Defaults to DEFAULT_BOUNDARIES.

    Returns:
        Non-empty words in source order.

    >>> split("toggle_case word")
    ['toggle', 'case', 'word']
    """
    rules = list(boundaries)
    delimiters = {rule.delimiter for rule in rules if rule.delimiter is not None}
    transitions = [rule for rule in rules if rule.delimiter is None]

    words: List[str] = []
    current: List[str] = []
    for i, cur in enumerate(text):
        if cur in delimiters:
            if current:
                words.append("".join(current))
                current = []
            continue
        if current:
            nxt = text[i + 1] if i + 1 < len(text) else ""
            if any(rule.splits(current[-1], cur, nxt) for rule in transitions):
                words.append("".join(current))
                current = []
        current.append(cur)

    if current:
        words.append("".join(current))
    return words
