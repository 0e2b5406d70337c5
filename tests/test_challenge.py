"""
Tests for challenges.

Tests cover:
- Answer models and guess grammar (models/challenge.py)
- ChallengeGenerator questions and answers (quiz/generator.py)
"""

import random

import pytest
from pydantic import ValidationError

from chuk_mcp_fretboard.constants import QuizKind
from chuk_mcp_fretboard.core import Guitar, IntervalStep, Mode, PitchClass, ScaleDegree, Tuning
from chuk_mcp_fretboard.errors import (
    InvalidGuessError,
    NotationError,
    UnrecognisedIntervalError,
    UnrecognisedModeError,
)
from chuk_mcp_fretboard.models import (
    Challenge,
    FretAnswer,
    IntervalAnswer,
    ModeAnswer,
    NoteAnswer,
    ScaleAnswer,
    StringAnswer,
    TuningAnswer,
)
from chuk_mcp_fretboard.quiz import ChallengeGenerator


class TestAnswers:
    """Tests for the tagged answer models."""

    def test_tags(self) -> None:
        """Each answer model carries its own tag."""
        assert FretAnswer(value=3).kind == "fret"
        assert NoteAnswer(value=PitchClass.C).kind == "note"
        assert StringAnswer(value=1).kind == "string"
        assert TuningAnswer(value=PitchClass.E).kind == "tuning"
        assert ModeAnswer(value=Mode.DORIAN).kind == "mode"
        assert ScaleAnswer(value=PitchClass.G).kind == "scale"
        assert IntervalAnswer(value=IntervalStep.HALF).kind == "interval"

    def test_describe(self) -> None:
        """Answers describe themselves as Tag(value)."""
        assert FretAnswer(value=3).describe() == "Fret(3)"
        assert NoteAnswer(value=PitchClass.Db).describe() == "Note(Db)"
        assert StringAnswer(value=4).describe() == "String(4)"
        assert TuningAnswer(value=PitchClass.E).describe() == "Tuning(E)"
        assert ModeAnswer(value=Mode.AEOLIAN).describe() == "Mode(Aeolian)"
        assert ScaleAnswer(value=PitchClass.G).describe() == "Scale(G)"
        assert IntervalAnswer(value=IntervalStep.WHOLE).describe() == "Interval(Whole)"

    def test_fret_range_validated(self) -> None:
        """Fret answers are limited to 0-11."""
        with pytest.raises(ValidationError):
            FretAnswer(value=12)

    def test_discriminated_union(self) -> None:
        """The answer type is selected by its kind tag."""
        challenge = Challenge.model_validate(
            {"question": "q", "answer": {"kind": "mode", "value": 5}}
        )
        assert isinstance(challenge.answer, ModeAnswer)
        assert challenge.answer.value == Mode.AEOLIAN

    def test_immutable(self) -> None:
        """Challenges are frozen."""
        challenge = Challenge(question="q", answer=FretAnswer(value=3))
        with pytest.raises(ValidationError):
            challenge.question = "other"  # type: ignore[misc]


class TestGuessGrammar:
    """Tests for judging guesses."""

    def test_fret_guess(self) -> None:
        """Fret guesses are whole numbers reduced modulo 12."""
        challenge = Challenge(question="q", answer=FretAnswer(value=1))
        assert challenge.validate_guess("1") is True
        assert challenge.validate_guess("13") is True
        assert challenge.validate_guess("25") is True
        assert challenge.validate_guess("2") is False

    def test_fret_open_string(self) -> None:
        """Fret 12 counts as the open string."""
        challenge = Challenge(question="q", answer=FretAnswer(value=0))
        assert challenge.validate_guess("0") is True
        assert challenge.validate_guess("12") is True

    def test_fret_malformed(self) -> None:
        """Non-numeric and negative fret guesses are incorrect."""
        challenge = Challenge(question="q", answer=FretAnswer(value=1))
        for guess in ["one", "", "1.0", "-11", "-1", "++1", "+"]:
            assert challenge.validate_guess(guess) is False

    def test_fret_leading_plus(self) -> None:
        """A leading plus sign is accepted."""
        challenge = Challenge(question="q", answer=FretAnswer(value=3))
        assert challenge.validate_guess("+3") is True
        assert challenge.validate_guess("+15") is True

    def test_huge_number_is_incorrect(self) -> None:
        """Digit strings too long to convert are incorrect, not a crash."""
        challenge = Challenge(question="q", answer=FretAnswer(value=1))
        assert challenge.validate_guess("1" * 5000) is False
        with pytest.raises(InvalidGuessError):
            challenge.check("1" * 5000)

        strings = Challenge(question="q", answer=StringAnswer(value=1))
        assert strings.validate_guess("1" * 5000) is False

    def test_fret_check_raises(self) -> None:
        """check() surfaces the parse error."""
        challenge = Challenge(question="q", answer=FretAnswer(value=1))
        with pytest.raises(InvalidGuessError):
            challenge.check("one")

    def test_string_guess_not_wrapped(self) -> None:
        """String numbers are compared as given."""
        challenge = Challenge(question="q", answer=StringAnswer(value=3))
        assert challenge.validate_guess("3") is True
        assert challenge.validate_guess("15") is False

    def test_note_guess_enharmonic(self) -> None:
        """Sharp and flat spellings both match."""
        challenge = Challenge(question="q", answer=NoteAnswer(value=PitchClass.Db))
        assert challenge.validate_guess("c#") is True
        assert challenge.validate_guess("db") is True
        assert challenge.validate_guess("d") is False

    def test_note_malformed(self) -> None:
        """A malformed note is incorrect, not an error."""
        challenge = Challenge(question="q", answer=NoteAnswer(value=PitchClass.Db))
        assert challenge.validate_guess("xyz") is False
        with pytest.raises(NotationError):
            challenge.check("xyz")

    def test_tuning_and_scale_guesses(self) -> None:
        """Tuning and scale answers take note names."""
        tuning = Challenge(question="q", answer=TuningAnswer(value=PitchClass.B))
        scale = Challenge(question="q", answer=ScaleAnswer(value=PitchClass.Gb))
        assert tuning.validate_guess("b") is True
        assert scale.validate_guess("f#") is True
        assert scale.validate_guess("g") is False

    def test_mode_guess(self) -> None:
        """Mode guesses are mode names."""
        challenge = Challenge(question="q", answer=ModeAnswer(value=Mode.DORIAN))
        assert challenge.validate_guess("dorian") is True
        assert challenge.validate_guess("ionian") is False
        assert challenge.validate_guess("minor") is False
        with pytest.raises(UnrecognisedModeError):
            challenge.check("minor")

    def test_interval_guess(self) -> None:
        """Interval guesses accept names and synonyms."""
        challenge = Challenge(question="q", answer=IntervalAnswer(value=IntervalStep.HALF))
        assert challenge.validate_guess("half") is True
        assert challenge.validate_guess("semitone") is True
        assert challenge.validate_guess("whole") is False
        with pytest.raises(UnrecognisedIntervalError):
            challenge.check("3")

    def test_peek(self) -> None:
        """peek() returns the answer description."""
        challenge = Challenge(question="q", answer=FretAnswer(value=3))
        assert challenge.peek() == "Fret(3)"


class TestQuizKind:
    """Tests for quiz kind selectors."""

    def test_parse(self) -> None:
        """Selector names parse in any case."""
        assert QuizKind.parse("frets") == QuizKind.FRETS
        assert QuizKind.parse(" Intervals ") == QuizKind.INTERVALS

    def test_parse_unknown(self) -> None:
        """Unknown selectors raise with the standard message."""
        with pytest.raises(ValueError, match="Unrecognised quiz kind: 'chords'"):
            QuizKind.parse("chords")


class TestChallengeGenerator:
    """Tests for ChallengeGenerator."""

    def test_fret(self, scripted) -> None:
        """Fret challenge for G on the low E string."""
        challenge = scripted(PitchClass.E, PitchClass.G).fret(Guitar(Tuning.EADGBE))
        assert challenge.question == "With EADGBE tuning, which fret is G on E?"
        assert challenge.answer == FretAnswer(value=3)
        assert challenge.validate_guess("3") is True
        assert challenge.validate_guess("15") is True
        assert challenge.validate_guess("27") is True
        assert challenge.validate_guess("4") is False

    def test_note(self, scripted) -> None:
        """Note challenge for fret 3 on A."""
        challenge = scripted(PitchClass.A, 3).note(Guitar(Tuning.EADGBE))
        assert challenge.question == "With EADGBE tuning, what note is fret 3 on A?"
        assert challenge.answer == NoteAnswer(value=PitchClass.C)

    def test_string(self, scripted) -> None:
        """String challenge for the G string."""
        challenge = scripted(PitchClass.G).string(Guitar(Tuning.EADGBE))
        assert challenge.question == "With EADGBE tuning, what string is G?"
        assert challenge.answer == StringAnswer(value=4)

    def test_tuning(self, scripted) -> None:
        """Tuning challenge names the string number."""
        challenge = scripted(PitchClass.F).tuning(Guitar(Tuning.CGCFAD))
        assert challenge.question == "With CGCFAD tuning, what is the note of open string 4?"
        assert challenge.answer == TuningAnswer(value=PitchClass.F)

    def test_mode(self, scripted) -> None:
        """Mode challenge names the tonic of the rotated scale."""
        challenge = scripted(Mode.DORIAN).mode()
        assert challenge.question == "In the key of C, what mode has a Tonic of D?"
        assert challenge.answer == ModeAnswer(value=Mode.DORIAN)

    def test_scale(self, scripted) -> None:
        """Scale challenge asks for a degree of C major."""
        challenge = scripted(ScaleDegree.DOMINANT).scale()
        assert challenge.question == "In the key of C major, what is the Dominant note?"
        assert challenge.answer == ScaleAnswer(value=PitchClass.G)

    def test_interval(self, scripted) -> None:
        """Interval challenge numbers steps from 1."""
        challenge = scripted(2).interval()
        assert challenge.question == "In the diatonic scale, what is the width of interval 3?"
        assert challenge.answer == IntervalAnswer(value=IntervalStep.HALF)

    def test_generate_dispatch(self, scripted) -> None:
        """generate() dispatches on the quiz kind."""
        generator = scripted(PitchClass.D, PitchClass.E)
        challenge = generator.generate(QuizKind.FRETS, Guitar(Tuning.DADGBE))
        assert challenge.question == "With DADGBE tuning, which fret is E on D?"
        assert challenge.answer == FretAnswer(value=2)

    def test_generate_any(self, scripted) -> None:
        """generate_any() picks a kind, then its inputs."""
        challenge = scripted(QuizKind.INTERVALS, 0).generate_any(Guitar())
        assert challenge.answer == IntervalAnswer(value=IntervalStep.WHOLE)

    def test_generate_any_limited_kinds(self, scripted) -> None:
        """generate_any() only picks from the given kinds."""
        generator = scripted(QuizKind.SCALES, ScaleDegree.TONIC)
        challenge = generator.generate_any(Guitar(), [QuizKind.MODES, QuizKind.SCALES])
        assert challenge.answer == ScaleAnswer(value=PitchClass.C)

    def test_every_kind_with_real_randomness(self) -> None:
        """Every kind produces a self-consistent challenge for every tuning."""
        generator = ChallengeGenerator(random.Random(1234))
        for tuning in Tuning:
            guitar = Guitar(tuning)
            for kind in QuizKind:
                for _ in range(20):
                    challenge = generator.generate(kind, guitar)
                    assert challenge.question
                    assert challenge.answer.kind
                    # The hint always names an answer that judges correct
                    value = challenge.peek().split("(", 1)[1].rstrip(")")
                    assert challenge.validate_guess(value.lower()) is True

    def test_seeded_generators_repeat(self) -> None:
        """The same seed yields the same questions."""
        first = ChallengeGenerator(random.Random(7))
        second = ChallengeGenerator(random.Random(7))
        guitar = Guitar()
        for _ in range(10):
            assert first.generate_any(guitar) == second.generate_any(guitar)
