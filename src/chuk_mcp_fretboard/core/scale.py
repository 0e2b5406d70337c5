"""
Scale primitives - ScaleDegree, Mode, Scale.

A scale is a key plus an interval pattern, rotated so that the requested
mode's first note lands on the tonic. Degrees are positions in the
realized scale.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

from chuk_mcp_fretboard.constants import ErrorMessages
from chuk_mcp_fretboard.errors import UnrecognisedModeError

from .pitch import IntervalStep, PitchClass


class ScaleDegree(IntEnum):
    """Position in a seven note scale (0 = tonic)."""

    TONIC = 0
    SUPERTONIC = 1
    MEDIANT = 2
    SUBDOMINANT = 3
    DOMINANT = 4
    SUBMEDIANT = 5
    SUBTONIC = 6

    @property
    def label(self) -> str:
        return self.name.capitalize()


class Mode(IntEnum):
    """
    The seven rotations of the diatonic pattern.

    The value is the number of places the major scale is rotated left:
    Ionian is the major scale itself, Aeolian starts on its sixth note.
    """

    IONIAN = 0
    DORIAN = 1
    PHRYGIAN = 2
    LYDIAN = 3
    MIXOLYDIAN = 4
    AEOLIAN = 5
    LOCRIAN = 6

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def parse(cls, name: str) -> Mode:
        """
        Parse a mode from its name, case-insensitive.

        Raises:
            UnrecognisedModeError: if the name is not one of the seven modes
        """
        key = name.strip().upper()
        try:
            return cls[key]
        except KeyError:
            raise UnrecognisedModeError(ErrorMessages.UNKNOWN_MODE.format(mode=name)) from None


# Steps between the seven notes of the major scale (the octave return is implied)
DIATONIC: tuple[IntervalStep, ...] = (
    IntervalStep.WHOLE,
    IntervalStep.WHOLE,
    IntervalStep.HALF,
    IntervalStep.WHOLE,
    IntervalStep.WHOLE,
    IntervalStep.WHOLE,
)


@dataclass(frozen=True)
class Scale:
    """
    An ordered run of seven pitch classes.

    Built from a key by stepping through an interval pattern, then rotated
    by the mode. Immutable and hashable.

    Examples:
        Scale.build(DIATONIC, Mode.IONIAN, PitchClass.C)   = C D E F G A B
        Scale.build(DIATONIC, Mode.AEOLIAN, PitchClass.C)  = A B C D E F G
    """

    notes: tuple[PitchClass, ...]

    def __post_init__(self) -> None:
        if len(self.notes) != len(ScaleDegree):
            raise ValueError(f"Scale must have {len(ScaleDegree)} notes, got {len(self.notes)}")

    @classmethod
    def build(
        cls,
        intervals: Sequence[IntervalStep],
        mode: Mode,
        key: PitchClass,
    ) -> Scale:
        """
        Build a scale from a key, a step pattern and a mode.

        Args:
            intervals: The steps between successive notes (six for a
                seven note scale)
            mode: Rotation to apply to the stepped notes
            key: The first note before rotation

        Returns:
            The realized scale
        """
        note = key
        notes = [key]
        for step in intervals:
            note = note.transpose(step.semitones)
            notes.append(note)

        shift = mode.value % len(notes)
        return cls(tuple(notes[shift:] + notes[:shift]))

    def note(self, degree: ScaleDegree) -> PitchClass:
        """Get the pitch class at a scale degree."""
        return self.notes[degree.value]

    def __str__(self) -> str:
        return " ".join(n.spell() for n in self.notes)
