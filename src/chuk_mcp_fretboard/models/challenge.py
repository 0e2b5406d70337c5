"""
Challenge model - a question paired with its canonical answer.

The answer is a tagged union: the `kind` tag decides how a free-text guess
is parsed and compared. Every answer type owns its own guess grammar, so
adding a quiz kind means adding one answer model here.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field

from chuk_mcp_fretboard.constants import ErrorMessages
from chuk_mcp_fretboard.core.pitch import IntervalStep, PitchClass, normalise_fret
from chuk_mcp_fretboard.core.scale import Mode
from chuk_mcp_fretboard.errors import GUESS_ERRORS, InvalidGuessError

logger = logging.getLogger(__name__)


def _parse_whole_number(guess: str) -> int:
    """
    Parse a non-negative base-10 integer, with an optional leading '+'.

    Negative numbers are rejected: there are no frets or strings below zero,
    and '-11' must not wrap round to fret 1.
    """
    text = guess.strip().removeprefix("+")
    if not (text.isascii() and text.isdigit()):
        raise InvalidGuessError(ErrorMessages.INVALID_GUESS.format(guess=guess))
    try:
        return int(text)
    except ValueError as e:
        # Digit strings past the interpreter's conversion limit
        raise InvalidGuessError(ErrorMessages.INVALID_GUESS.format(guess=guess)) from e


class FretAnswer(BaseModel):
    """Fret number (0-11) on a string."""

    kind: Literal["fret"] = "fret"
    value: int = Field(..., ge=0, le=11, description="Fret number")

    model_config = {"frozen": True}

    def parse_guess(self, guess: str) -> int:
        # Fret 12 sounds like the open string, so 15 is as good as 3
        return normalise_fret(_parse_whole_number(guess))

    def describe(self) -> str:
        return f"Fret({self.value})"


class NoteAnswer(BaseModel):
    """Note sounded at a fret."""

    kind: Literal["note"] = "note"
    value: PitchClass

    model_config = {"frozen": True}

    def parse_guess(self, guess: str) -> PitchClass:
        return PitchClass.parse(guess)

    def describe(self) -> str:
        return f"Note({self.value.spell()})"


class StringAnswer(BaseModel):
    """1-based string number within a tuning."""

    kind: Literal["string"] = "string"
    value: int = Field(..., ge=1, description="String number, low string first")

    model_config = {"frozen": True}

    def parse_guess(self, guess: str) -> int:
        return _parse_whole_number(guess)

    def describe(self) -> str:
        return f"String({self.value})"


class TuningAnswer(BaseModel):
    """Note of an open string."""

    kind: Literal["tuning"] = "tuning"
    value: PitchClass

    model_config = {"frozen": True}

    def parse_guess(self, guess: str) -> PitchClass:
        return PitchClass.parse(guess)

    def describe(self) -> str:
        return f"Tuning({self.value.spell()})"


class ModeAnswer(BaseModel):
    """Mode name."""

    kind: Literal["mode"] = "mode"
    value: Mode

    model_config = {"frozen": True}

    def parse_guess(self, guess: str) -> Mode:
        return Mode.parse(guess)

    def describe(self) -> str:
        return f"Mode({self.value.label})"


class ScaleAnswer(BaseModel):
    """Note at a scale degree."""

    kind: Literal["scale"] = "scale"
    value: PitchClass

    model_config = {"frozen": True}

    def parse_guess(self, guess: str) -> PitchClass:
        return PitchClass.parse(guess)

    def describe(self) -> str:
        return f"Scale({self.value.spell()})"


class IntervalAnswer(BaseModel):
    """Width of a step in a scale pattern."""

    kind: Literal["interval"] = "interval"
    value: IntervalStep

    model_config = {"frozen": True}

    def parse_guess(self, guess: str) -> IntervalStep:
        return IntervalStep.parse(guess)

    def describe(self) -> str:
        return f"Interval({self.value.label})"


Answer = Annotated[
    FretAnswer
    | NoteAnswer
    | StringAnswer
    | TuningAnswer
    | ModeAnswer
    | ScaleAnswer
    | IntervalAnswer,
    Field(discriminator="kind"),
]


class Challenge(BaseModel):
    """
    A rendered question and the answer that satisfies it.

    Immutable once built. Guesses are judged by parsing them with the
    answer's grammar and comparing by value.
    """

    question: str = Field(..., description="Question shown to the solver")
    answer: Answer = Field(..., description="Canonical answer, tagged by kind")

    model_config = {"frozen": True}

    def check(self, guess: str) -> bool:
        """
        Judge a guess, raising if it cannot be parsed.

        Raises:
            NotationError, InvalidGuessError, UnrecognisedModeError,
            UnrecognisedIntervalError: if the guess is malformed
        """
        parsed: Any = self.answer.parse_guess(guess)
        return bool(parsed == self.answer.value)

    def validate_guess(self, guess: str) -> bool:
        """Judge a guess; a malformed guess is simply incorrect."""
        try:
            return self.check(guess)
        except GUESS_ERRORS as e:
            logger.debug("Malformed guess %r: %s", guess, e)
            return False

    def peek(self) -> str:
        """Debug representation of the answer, shown as a hint."""
        return self.answer.describe()
