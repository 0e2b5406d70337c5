"""
Guitar primitives - Tuning and Guitar.

A tuning is a fixed set of open-string pitch classes. A guitar maps
between (string, fret) positions and pitch classes under one tuning.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from chuk_mcp_fretboard.constants import ErrorMessages
from chuk_mcp_fretboard.errors import UnknownTuningError

from .pitch import PitchClass


class Tuning(str, Enum):
    """Named guitar tunings, spelled low string to high."""

    EADGBE = "EADGBE"  # Standard
    DADGBE = "DADGBE"  # Drop D
    CGCFAD = "CGCFAD"  # Drop C

    @property
    def strings(self) -> tuple[PitchClass, ...]:
        """Open-string pitch classes, low to high."""
        return TUNING_STRINGS[self]

    @classmethod
    def parse(cls, name: str) -> Tuning:
        """
        Parse a tuning from its name, case-insensitive.

        Raises:
            UnknownTuningError: if the tuning is not in the table
        """
        try:
            return cls(name.strip().upper())
        except ValueError:
            raise UnknownTuningError(ErrorMessages.UNKNOWN_TUNING.format(tuning=name)) from None


_C, _D, _E, _F, _G, _A, _B = (
    PitchClass.C,
    PitchClass.D,
    PitchClass.E,
    PitchClass.F,
    PitchClass.G,
    PitchClass.A,
    PitchClass.B,
)

TUNING_STRINGS: dict[Tuning, tuple[PitchClass, ...]] = {
    Tuning.EADGBE: (_E, _A, _D, _G, _B, _E),
    Tuning.DADGBE: (_D, _A, _D, _G, _B, _E),
    Tuning.CGCFAD: (_C, _G, _C, _F, _A, _D),
}


@dataclass(frozen=True)
class Guitar:
    """
    A guitar strung in one tuning.

    Holds no state beyond the tuning; all positions are derived.
    """

    tuning: Tuning = Tuning.EADGBE

    def strings(self) -> tuple[PitchClass, ...]:
        """Open-string pitch classes, low to high."""
        return self.tuning.strings

    def derive_string(self, note: PitchClass) -> int:
        """
        Get the 1-based number of the first string tuned to a note.

        Raises:
            ValueError: if no open string is tuned to the note
        """
        strings = self.strings()
        if note not in strings:
            raise ValueError(
                ErrorMessages.NOTE_NOT_ON_TUNING.format(note=note.spell(), tuning=self.tuning.value)
            )
        return strings.index(note) + 1

    @staticmethod
    def derive_fret(string: PitchClass, want: PitchClass) -> int:
        """
        Get the fret (0-11) that sounds a note on an open string.

        Example:
            Guitar.derive_fret(PitchClass.E, PitchClass.G) == 3
        """
        sn = string.value
        wn = want.value

        if wn < sn:
            return 12 - ((sn - wn) % 12)
        return (wn - sn) % 12

    @staticmethod
    def derive_note(string: PitchClass, fret: int) -> PitchClass:
        """Get the note sounded at a fret on an open string."""
        return string.transpose(fret)
