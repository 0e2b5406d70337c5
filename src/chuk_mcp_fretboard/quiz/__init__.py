"""
Quiz layer - generating challenges and judging guesses.

- ChallengeGenerator: random challenges for each quiz kind
- Renderer: interaction boundary (TextRenderer, ScriptedRenderer)
- issue / run_forever: the question-and-guess loop
- ChallengeManager: open challenges for request/response surfaces
"""

from chuk_mcp_fretboard.quiz.engine import issue, run_forever
from chuk_mcp_fretboard.quiz.generator import ChallengeGenerator, RandomSource
from chuk_mcp_fretboard.quiz.manager import ChallengeManager, GuessResult
from chuk_mcp_fretboard.quiz.renderer import Renderer, ScriptedRenderer, TextRenderer

__all__ = [
    "ChallengeGenerator",
    "ChallengeManager",
    "GuessResult",
    "RandomSource",
    "Renderer",
    "ScriptedRenderer",
    "TextRenderer",
    "issue",
    "run_forever",
]
