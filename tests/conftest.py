"""
Pytest configuration and shared fixtures.
"""

import tempfile
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

import pytest

from chuk_mcp_fretboard.quiz import ChallengeGenerator


class ScriptedRandom:
    """Random source that returns a fixed sequence of choices."""

    def __init__(self, *picks: Any):
        self.picks = list(picks)

    def choice(self, seq: Sequence[Any]) -> Any:
        if not self.picks:
            raise AssertionError("ScriptedRandom ran out of picks")
        pick = self.picks.pop(0)
        assert pick in seq, f"{pick!r} is not a candidate in {list(seq)!r}"
        return pick


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def scripted() -> Callable[..., ChallengeGenerator]:
    """Factory for generators that make the given choices in order."""

    def make(*picks: Any) -> ChallengeGenerator:
        return ChallengeGenerator(ScriptedRandom(*picks))

    return make
