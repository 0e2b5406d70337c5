"""
Error types for the fretboard drill.

Theory errors subclass ValueError so callers parsing free text can treat
them like any other bad value. RendererError is kept apart: it means the
solver can no longer be reached and is never downgraded to a verdict.
"""

from __future__ import annotations


class FretboardError(Exception):
    """Base class for all fretboard drill errors."""


class TheoryError(FretboardError, ValueError):
    """A theory value could not be parsed or derived."""


class NotationError(TheoryError):
    """Unparsable note name."""


class OffsetError(TheoryError):
    """Transposition produced no mapped pitch class."""


class UnrecognisedModeError(TheoryError):
    """Unparsable mode name."""


class UnrecognisedIntervalError(TheoryError):
    """Unparsable interval name."""


class UnknownTuningError(TheoryError):
    """Tuning name not in the tuning table."""


class InvalidGuessError(FretboardError, ValueError):
    """A guess that should be a whole number was not."""


class RendererError(FretboardError):
    """The interaction boundary failed (closed input, broken output)."""


class InputClosedError(RendererError):
    """The solver's input reached end of file."""


class ChallengeNotFoundError(FretboardError, KeyError):
    """No open challenge with the given id."""

    def __str__(self) -> str:
        # KeyError quotes its argument, keep the message readable
        return str(self.args[0]) if self.args else ""


# Errors raised while parsing a guess; judged as an incorrect answer
GUESS_ERRORS: tuple[type[Exception], ...] = (
    NotationError,
    InvalidGuessError,
    UnrecognisedModeError,
    UnrecognisedIntervalError,
)
