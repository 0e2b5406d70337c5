"""
Challenge generator - random, well-formed questions for each quiz kind.

Randomness comes from an injected source with a `choice(seq)` method.
Production wiring passes a `random.Random`; tests pass a scripted source
to pin exact questions and answers.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from typing import Protocol, TypeVar

from chuk_mcp_fretboard.constants import ALL_KINDS, ErrorMessages, QuizKind
from chuk_mcp_fretboard.core.guitar import Guitar
from chuk_mcp_fretboard.core.pitch import PitchClass
from chuk_mcp_fretboard.core.scale import DIATONIC, Mode, Scale, ScaleDegree
from chuk_mcp_fretboard.models.challenge import (
    Challenge,
    FretAnswer,
    IntervalAnswer,
    ModeAnswer,
    NoteAnswer,
    ScaleAnswer,
    StringAnswer,
    TuningAnswer,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Fixed context for the theory quizzes
THEORY_KEY = PitchClass.C


class RandomSource(Protocol):
    """Uniform choice among a finite set of candidates."""

    def choice(self, seq: Sequence[T]) -> T: ...


class ChallengeGenerator:
    """
    Builds challenges from random inputs.

    Each method picks its inputs uniformly from the relevant finite set,
    computes the answer with the core primitives and phrases the question.
    Errors from the core propagate: a round that cannot be generated is
    not asked.
    """

    def __init__(self, rng: RandomSource | None = None):
        """
        Initialize the generator.

        Args:
            rng: Source of random choices (default: a fresh random.Random)
        """
        self.rng: RandomSource = rng if rng is not None else random.Random()

    def _choose_note(self) -> PitchClass:
        return self.rng.choice(list(PitchClass))

    def _choose_string(self, guitar: Guitar) -> PitchClass:
        return self.rng.choice(guitar.strings())

    def _choose_fret(self) -> int:
        return self.rng.choice(range(12))

    def fret(self, guitar: Guitar) -> Challenge:
        """Which fret is a note on a string."""
        string = self._choose_string(guitar)
        note = self._choose_note()

        return Challenge(
            question=(
                f"With {guitar.tuning.value} tuning, which fret is "
                f"{note.spell()} on {string.spell()}?"
            ),
            answer=FretAnswer(value=Guitar.derive_fret(string, note)),
        )

    def note(self, guitar: Guitar) -> Challenge:
        """What note is a fret on a string."""
        string = self._choose_string(guitar)
        fret = self._choose_fret()

        return Challenge(
            question=(
                f"With {guitar.tuning.value} tuning, what note is fret "
                f"{fret} on {string.spell()}?"
            ),
            answer=NoteAnswer(value=Guitar.derive_note(string, fret)),
        )

    def string(self, guitar: Guitar) -> Challenge:
        """What string number is an open string."""
        string = self._choose_string(guitar)

        return Challenge(
            question=f"With {guitar.tuning.value} tuning, what string is {string.spell()}?",
            answer=StringAnswer(value=guitar.derive_string(string)),
        )

    def tuning(self, guitar: Guitar) -> Challenge:
        """What note is an open string number."""
        string = self._choose_string(guitar)

        return Challenge(
            question=(
                f"With {guitar.tuning.value} tuning, what is the note of open string "
                f"{guitar.derive_string(string)}?"
            ),
            answer=TuningAnswer(value=string),
        )

    def mode(self) -> Challenge:
        """Which mode of C has a given tonic."""
        degree = ScaleDegree.TONIC
        mode = self.rng.choice(list(Mode))
        scale = Scale.build(DIATONIC, mode, THEORY_KEY)

        return Challenge(
            question=(
                f"In the key of {THEORY_KEY.spell()}, what mode has a {degree.label} "
                f"of {scale.note(degree).spell()}?"
            ),
            answer=ModeAnswer(value=mode),
        )

    def scale(self) -> Challenge:
        """Which note is a degree of C major."""
        scale = Scale.build(DIATONIC, Mode.IONIAN, THEORY_KEY)
        degree = self.rng.choice(list(ScaleDegree))

        return Challenge(
            question=f"In the key of {THEORY_KEY.spell()} major, what is the {degree.label} note?",
            answer=ScaleAnswer(value=scale.note(degree)),
        )

    def interval(self) -> Challenge:
        """How wide is a numbered step of the diatonic pattern."""
        index = self.rng.choice(range(len(DIATONIC)))

        return Challenge(
            question=f"In the diatonic scale, what is the width of interval {index + 1}?",
            answer=IntervalAnswer(value=DIATONIC[index]),
        )

    def generate(self, kind: QuizKind, guitar: Guitar) -> Challenge:
        """
        Generate a challenge of the given kind.

        Args:
            kind: The quiz kind
            guitar: Guitar for the fretboard kinds (ignored by theory kinds)

        Returns:
            A new Challenge
        """
        if kind is QuizKind.FRETS:
            challenge = self.fret(guitar)
        elif kind is QuizKind.NOTES:
            challenge = self.note(guitar)
        elif kind is QuizKind.STRINGS:
            challenge = self.string(guitar)
        elif kind is QuizKind.TUNINGS:
            challenge = self.tuning(guitar)
        elif kind is QuizKind.MODES:
            challenge = self.mode()
        elif kind is QuizKind.SCALES:
            challenge = self.scale()
        elif kind is QuizKind.INTERVALS:
            challenge = self.interval()
        else:
            raise ValueError(ErrorMessages.UNKNOWN_KIND.format(kind=kind))

        logger.debug("Generated %s challenge: %s", kind.value, challenge.question)
        return challenge

    def generate_any(
        self,
        guitar: Guitar,
        kinds: Sequence[QuizKind] = ALL_KINDS,
    ) -> Challenge:
        """Generate a challenge of a kind chosen uniformly from `kinds`."""
        return self.generate(self.rng.choice(list(kinds)), guitar)
