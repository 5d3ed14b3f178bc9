"""Unit tests for the deterministic casing patterns.

WHY: Toggle and alternating case are exact, reproducible transformations.
Small slips (restarting the alternation per word, flipping the flag on a
digit) silently produce the wrong style, so every rule is pinned down.

HOW: Tests call toggle_word(), toggle(), alternating() and
Pattern.mutate() directly on word lists; no string splitting involved.

RULES:
- Patterns must preserve word count and per-word character count.
- Uncased characters pass through and never affect the alternation.
"""

from case_extras.pattern import Pattern, alternating, toggle, toggle_word


class TestToggleWord:
    """toggle_word() lowercases the first character, uppercases the rest."""

    def test_mixed_word(self):
        assert toggle_word("Case") == "cASE"

    def test_empty_word(self):
        assert toggle_word("") == ""

    def test_single_character_is_lowercased(self):
        assert toggle_word("A") == "a"
        assert toggle_word("a") == "a"

    def test_leading_digit_passes_through(self):
        assert toggle_word("1st") == "1ST"

    def test_non_alphabetic_word_unchanged(self):
        assert toggle_word("42-7") == "42-7"

    def test_non_ascii_letters(self):
        assert toggle_word("Äpple") == "äPPLE"


class TestToggle:
    """toggle() applies toggle_word() per word, with no cross-word state."""

    def test_sample_words(self, sample_words):
        assert toggle(sample_words) == ["cASE", "cONVERSION", "lIBRARY"]

    def test_empty_sequence(self):
        assert toggle([]) == []

    def test_preserves_word_and_character_counts(self, sample_words):
        words = sample_words + ["", "x", "a1b2"]
        result = toggle(words)
        assert len(result) == len(words)
        assert [len(w) for w in result] == [len(w) for w in words]

    def test_twice_does_not_restore_original(self):
        """Toggle is not an involution: applying it twice keeps toggle case."""
        once = toggle(["Case"])
        twice = toggle(once)
        assert twice != ["Case"]
        assert twice == ["cASE"]

    def test_does_not_mutate_input(self, sample_words):
        original = list(sample_words)
        toggle(sample_words)
        assert sample_words == original


class TestAlternating:
    """alternating() carries one upper/lower flag across all words."""

    def test_sample_words(self, sample_words):
        assert alternating(sample_words) == ["cAsE", "cOnVeRsIoN", "lIbRaRy"]

    def test_phase_continues_across_words(self):
        assert alternating(["Another", "Example"]) == ["aNoThEr", "ExAmPlE"]

    def test_starts_lowercase(self):
        assert alternating(["ABC"]) == ["aBc"]

    def test_uncased_characters_do_not_flip(self):
        assert alternating(["a1b", "c"]) == ["a1B", "c"]
        assert alternating(["a b"]) == ["a B"]

    def test_no_alphabetic_characters(self):
        assert alternating(["123", "-", ""]) == ["123", "-", ""]

    def test_empty_sequence(self):
        assert alternating([]) == []

    def test_each_call_restarts(self):
        """The flag is local to one call — an odd-length word must not leak."""
        first = alternating(["abc"])
        second = alternating(["abc"])
        assert first == second == ["aBc"]

    def test_preserves_word_and_character_counts(self, sample_words):
        result = alternating(sample_words)
        assert [len(w) for w in result] == [len(w) for w in sample_words]


class TestPatternEnum:
    """Pattern.mutate() dispatches to the matching transform."""

    def test_toggle_member(self, sample_words):
        assert Pattern.TOGGLE.mutate(sample_words) == toggle(sample_words)

    def test_alternating_member(self, sample_words):
        assert Pattern.ALTERNATING.mutate(sample_words) == alternating(sample_words)

    def test_rng_ignored_by_deterministic_patterns(self, sample_words, seeded_rng):
        assert Pattern.TOGGLE.mutate(sample_words, seeded_rng()) == toggle(sample_words)

    def test_deterministic_members_are_not_random(self):
        assert not Pattern.TOGGLE.is_random
        assert not Pattern.ALTERNATING.is_random
