"""
Pydantic models for the fretboard drill.

This module provides:
- Challenge: Question plus tagged canonical answer
- FretAnswer .. IntervalAnswer: One answer model per tag
"""

from chuk_mcp_fretboard.models.challenge import (
    Answer,
    Challenge,
    FretAnswer,
    IntervalAnswer,
    ModeAnswer,
    NoteAnswer,
    ScaleAnswer,
    StringAnswer,
    TuningAnswer,
)

__all__ = [
    "Answer",
    "Challenge",
    "FretAnswer",
    "IntervalAnswer",
    "ModeAnswer",
    "NoteAnswer",
    "ScaleAnswer",
    "StringAnswer",
    "TuningAnswer",
]
