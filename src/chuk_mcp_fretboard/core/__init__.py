"""
Core theory primitives.

These are the invariants every challenge is computed from:
- PitchClass: The 12 chromatic pitch classes (0-11)
- IntervalStep: Half/whole step sizes in a scale pattern
- ScaleDegree: Position in a scale (Tonic..Subtonic)
- Mode: Rotation of the diatonic pattern (Ionian..Locrian)
- Scale: Seven pitch classes from a key, pattern and mode
- Tuning: Open-string pitch classes of a named tuning
- Guitar: Fret/string arithmetic under one tuning
"""

from chuk_mcp_fretboard.core.guitar import TUNING_STRINGS, Guitar, Tuning
from chuk_mcp_fretboard.core.pitch import IntervalStep, PitchClass, normalise_fret
from chuk_mcp_fretboard.core.scale import DIATONIC, Mode, Scale, ScaleDegree

__all__ = [
    # Pitch
    "PitchClass",
    "IntervalStep",
    "normalise_fret",
    # Scale
    "ScaleDegree",
    "Mode",
    "Scale",
    "DIATONIC",
    # Guitar
    "Tuning",
    "TUNING_STRINGS",
    "Guitar",
]
