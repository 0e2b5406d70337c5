"""
Quiz tools - MCP tools for fretboard and theory drills.

Tools for opening challenges, submitting guesses and looking up the
theory the challenges are built from.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_fretboard.constants import QuizKind, VerdictMessages
from chuk_mcp_fretboard.core import DIATONIC, Mode, PitchClass, Scale, ScaleDegree, Tuning
from chuk_mcp_fretboard.quiz import ChallengeManager

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_quiz_tools(
    mcp: ChukMCPServer,
    manager: ChallengeManager,
) -> dict[str, Any]:
    """
    Register quiz tools with the MCP server.

    Args:
        mcp: The MCP server instance
        manager: The challenge manager

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_new_challenge(
        kind: str | None = None,
        tuning: str | None = None,
    ) -> str:
        """
        Open a new drill challenge.

        Generates a random question of the given kind. The answer stays
        hidden; submit guesses with fretboard_submit_guess.

        Args:
            kind: Quiz kind: frets, notes, strings, tunings, modes, scales
                or intervals (default: random)
            tuning: Guitar tuning: EADGBE, DADGBE or CGCFAD (default: EADGBE)

        Returns:
            JSON string with the challenge id and question

        Example:
            fretboard_new_challenge(kind="frets", tuning="DADGBE")
        """
        try:
            challenge_id, challenge = manager.create(
                kind=QuizKind.parse(kind) if kind else None,
                tuning=Tuning.parse(tuning) if tuning else None,
            )

            return json.dumps(
                {
                    "status": "success",
                    "challenge": {
                        "id": challenge_id,
                        "kind": challenge.answer.kind,
                        "question": challenge.question,
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to create challenge")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_new_challenge"] = fretboard_new_challenge

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_submit_guess(challenge_id: str, guess: str) -> str:
        """
        Submit a guess for an open challenge.

        Malformed guesses are judged incorrect. Submitting 'peek' reveals
        the answer without judging. A correct guess closes the challenge.

        Args:
            challenge_id: Id returned by fretboard_new_challenge
            guess: The answer, e.g. '3', 'C#', 'dorian', 'whole'

        Returns:
            JSON string with the verdict

        Example:
            fretboard_submit_guess(challenge_id="3f2a9c1b7d0e", guess="Db")
        """
        try:
            result = manager.submit(challenge_id, guess)

            if result.hint is not None:
                return json.dumps(
                    {
                        "status": "success",
                        "challenge_id": challenge_id,
                        "hint": result.hint,
                    }
                )

            return json.dumps(
                {
                    "status": "success",
                    "challenge_id": challenge_id,
                    "correct": result.correct,
                    "verdict": (
                        VerdictMessages.CORRECT if result.correct else VerdictMessages.INCORRECT
                    ),
                    "attempts": result.attempts,
                    "closed": result.closed,
                }
            )
        except Exception as e:
            logger.exception("Failed to submit guess")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_submit_guess"] = fretboard_submit_guess

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_peek(challenge_id: str) -> str:
        """
        Reveal the answer of an open challenge.

        The challenge stays open.

        Args:
            challenge_id: Id returned by fretboard_new_challenge

        Returns:
            JSON string with the answer hint

        Example:
            fretboard_peek(challenge_id="3f2a9c1b7d0e")
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "challenge_id": challenge_id,
                    "hint": manager.peek(challenge_id),
                }
            )
        except Exception as e:
            logger.exception("Failed to peek challenge")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_peek"] = fretboard_peek

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_list_tunings() -> str:
        """
        List the supported tunings.

        Returns:
            JSON string with each tuning's open strings, low to high

        Example:
            fretboard_list_tunings()
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "tunings": [
                        {
                            "name": tuning.value,
                            "strings": [s.spell() for s in tuning.strings],
                        }
                        for tuning in Tuning
                    ],
                }
            )
        except Exception as e:
            logger.exception("Failed to list tunings")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_list_tunings"] = fretboard_list_tunings

    @mcp.tool  # type: ignore[arg-type]
    async def fretboard_build_scale(key: str = "C", mode: str = "ionian") -> str:
        """
        Build a diatonic scale.

        Args:
            key: Starting note before the mode rotation (e.g. 'C', 'F#', 'Bb')
            mode: Mode name (ionian, dorian, phrygian, lydian, mixolydian,
                aeolian, locrian)

        Returns:
            JSON string with the seven notes and their degrees

        Example:
            fretboard_build_scale(key="C", mode="aeolian")
        """
        try:
            root = PitchClass.parse(key)
            scale_mode = Mode.parse(mode)
            scale = Scale.build(DIATONIC, scale_mode, root)

            return json.dumps(
                {
                    "status": "success",
                    "scale": {
                        "key": root.spell(),
                        "mode": scale_mode.label,
                        "notes": [n.spell() for n in scale.notes],
                        "degrees": {d.label: scale.note(d).spell() for d in ScaleDegree},
                    },
                }
            )
        except Exception as e:
            logger.exception("Failed to build scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["fretboard_build_scale"] = fretboard_build_scale

    return tools
