"""Character helpers shared by the casing patterns."""


def has_case(letter: str) -> bool:
    """True if the character has an upper/lower case distinction.

    Characters without one (digits, punctuation, CJK) pass through every
    pattern unchanged.
    """
    return letter.isupper() or letter.islower()
