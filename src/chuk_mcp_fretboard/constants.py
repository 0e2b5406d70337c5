"""
Constants and enums for the fretboard drill.

No magic strings - use enums for constrained values.
"""

from enum import Enum

# Typed at the prompt instead of a guess to reveal the answer
PEEK = "peek"


class QuizKind(str, Enum):
    """
    Quiz kinds, named by the selector accepted on the command line.

    Each kind produces challenges with one answer tag (see models.challenge).
    """

    FRETS = "frets"  # Which fret is a note on a string
    NOTES = "notes"  # What note is a fret on a string
    STRINGS = "strings"  # What string number is an open string
    TUNINGS = "tunings"  # What note is an open string number
    MODES = "modes"  # Which mode has a given tonic in C
    SCALES = "scales"  # Which note is a degree of C major
    INTERVALS = "intervals"  # How wide is a diatonic interval

    @classmethod
    def parse(cls, name: str) -> "QuizKind":
        """Parse a quiz kind from its selector name, case-insensitive."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(ErrorMessages.UNKNOWN_KIND.format(kind=name)) from None


# Default quiz kinds for a random session
ALL_KINDS: tuple[QuizKind, ...] = tuple(QuizKind)


class ErrorMessages:
    """Standardized error messages."""

    UNKNOWN_NOTE = "Unrecognised note: '{note}'."
    OFFSET_OUT_OF_RANGE = "Offset {offset} from {base} does not map to a pitch class."
    UNKNOWN_MODE = "Unrecognised mode: '{mode}'."
    UNKNOWN_INTERVAL = "Unrecognised interval: '{interval}'."
    UNKNOWN_TUNING = "Unrecognised tuning: '{tuning}'."
    UNKNOWN_KIND = "Unrecognised quiz kind: '{kind}'."
    INVALID_GUESS = "Invalid guess: '{guess}'. Expected a whole number."
    NOTE_NOT_ON_TUNING = "{note} is not an open string in {tuning} tuning."
    CHALLENGE_NOT_FOUND = "Challenge '{challenge_id}' not found."
    INPUT_CLOSED = "Input closed."


class VerdictMessages:
    """Text rendered for a judged guess."""

    CORRECT = "Correct"
    INCORRECT = "Incorrect"
