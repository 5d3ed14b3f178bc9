"""Shared test fixtures for the case_extras test suite.

WHY: Several test modules exercise the same sample sentences and need
seeded random generators. Centralizing them keeps the expected outputs in
one place.

HOW: Plain constants for the sample word lists plus pytest fixtures that
return fresh copies, and a factory fixture for seeded ``random.Random``
instances.

RULES:
- Fixtures return copies so tests can never mutate shared data.
- Seeded generators are created per test; never share one across tests.
"""

import random
from typing import List

import pytest

SAMPLE_WORDS: List[str] = ["Case", "CONVERSION", "library"]
SAMPLE_TEXT = "My variable NAME"


@pytest.fixture
def sample_words():
    """The three-word sample used throughout the pattern examples."""
    return list(SAMPLE_WORDS)


@pytest.fixture
def sample_text():
    """Space-delimited sentence with mixed casing."""
    return SAMPLE_TEXT


@pytest.fixture
def seeded_rng():
    """Factory for seeded generators: ``seeded_rng(42)``."""
    def _make(seed=1234):
        return random.Random(seed)
    return _make
