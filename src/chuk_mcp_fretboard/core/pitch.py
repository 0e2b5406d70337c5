"""
Pitch primitives - PitchClass and IntervalStep.

PitchClass represents the 12 chromatic pitches (octave-independent).
IntervalStep is the size of one step in a scale pattern.
"""

from __future__ import annotations

from enum import IntEnum

from chuk_mcp_fretboard.constants import ErrorMessages
from chuk_mcp_fretboard.errors import NotationError, OffsetError, UnrecognisedIntervalError

# Accepted spellings (module level to avoid IntEnum member issues)
_SPELLINGS: dict[str, int] = {
    "c": 0,
    "c#": 1,
    "db": 1,
    "d": 2,
    "d#": 3,
    "eb": 3,
    "e": 4,
    "f": 5,
    "f#": 6,
    "gb": 6,
    "g": 7,
    "g#": 8,
    "ab": 8,
    "a": 9,
    "a#": 10,
    "bb": 10,
    "b": 11,
}

_INTERVAL_NAMES: dict[str, int] = {
    "unison": 0,
    "half": 1,
    "semitone": 1,
    "whole": 2,
    "tone": 2,
}


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent. Enharmonic spellings share a value (C# == Db == 1);
    the canonical spelling prefers flats.
    """

    C = 0
    Db = 1
    D = 2
    Eb = 3
    E = 4
    F = 5
    Gb = 6
    G = 7
    Ab = 8
    A = 9
    Bb = 10
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones, wrapping into 0-11."""
        try:
            return PitchClass((self.value + semitones) % 12)
        except ValueError as e:
            raise OffsetError(
                ErrorMessages.OFFSET_OUT_OF_RANGE.format(offset=semitones, base=self.name)
            ) from e

    def spell(self) -> str:
        """Canonical (flat) spelling."""
        return self.name

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """
        Parse a pitch class from a note name.

        Case-insensitive. Accepts naturals ('c'..'b') and the sharp or flat
        spelling of each accidental ('c#', 'db'); sharps map to the flat
        member.

        Raises:
            NotationError: if the name is not a recognised spelling
        """
        key = name.strip().lower()
        if key not in _SPELLINGS:
            raise NotationError(ErrorMessages.UNKNOWN_NOTE.format(note=name))
        return cls(_SPELLINGS[key])


class IntervalStep(IntEnum):
    """Size of one step in a scale pattern, in semitones."""

    UNISON = 0
    HALF = 1
    WHOLE = 2

    @property
    def semitones(self) -> int:
        """Number of semitones in this step."""
        return self.value

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @classmethod
    def parse(cls, name: str) -> IntervalStep:
        """
        Parse a step from 'half'/'semitone', 'whole'/'tone' or 'unison'.

        Raises:
            UnrecognisedIntervalError: for any other name
        """
        key = name.strip().lower()
        if key not in _INTERVAL_NAMES:
            raise UnrecognisedIntervalError(ErrorMessages.UNKNOWN_INTERVAL.format(interval=name))
        return cls(_INTERVAL_NAMES[key])


def normalise_fret(fret: int) -> int:
    """Reduce a fret number into 0-11 (fret 12 sounds like the open string)."""
    return fret % 12
