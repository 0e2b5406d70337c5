"""
Quiz engine - asks a challenge and judges guesses until one is correct.

States: asked -> awaiting guess -> revealed | incorrect (both loop back)
| correct (done). A RendererError from the boundary ends the loop from
any state and propagates to the caller.
"""

from __future__ import annotations

import logging

from chuk_mcp_fretboard.config import QuizConfig
from chuk_mcp_fretboard.constants import PEEK, QuizKind
from chuk_mcp_fretboard.core.guitar import Guitar
from chuk_mcp_fretboard.models.challenge import Challenge
from chuk_mcp_fretboard.quiz.generator import ChallengeGenerator
from chuk_mcp_fretboard.quiz.renderer import Renderer

logger = logging.getLogger(__name__)


def issue(challenge: Challenge, renderer: Renderer) -> int:
    """
    Ask a challenge and loop until the solver answers it.

    'peek' shows the answer as a hint without judging anything. Any other
    response is judged; malformed guesses are incorrect, not errors.
    There is no guess limit.

    Args:
        challenge: The challenge to ask
        renderer: The interaction boundary

    Returns:
        Number of guesses judged (including the correct one)

    Raises:
        RendererError: if the boundary fails
    """
    renderer.present_question(challenge.question)
    guesses = 0

    while True:
        response = renderer.read_response().strip().lower()

        if response == PEEK:
            renderer.present_hint(challenge.peek())
            continue

        correct = challenge.validate_guess(response)
        guesses += 1
        logger.debug("Guess %d %r judged %s", guesses, response, correct)
        renderer.present_verdict(correct)
        if correct:
            return guesses


def run_forever(
    config: QuizConfig,
    renderer: Renderer,
    generator: ChallengeGenerator,
    kind: QuizKind | None = None,
) -> None:
    """
    Ask challenges one after another, with a blank separator between rounds.

    Args:
        config: Quiz configuration (tuning, kinds for random rounds)
        renderer: The interaction boundary
        generator: Source of challenges
        kind: Quiz kind for every round, or None for a random kind per round

    Only returns by raising (RendererError when the solver goes away).
    """
    guitar = Guitar(config.tuning)
    rounds = 0

    while True:
        if kind is None:
            challenge = generator.generate_any(guitar, config.kinds)
        else:
            challenge = generator.generate(kind, guitar)

        guesses = issue(challenge, renderer)
        rounds += 1
        logger.debug("Round %d answered after %d guesses", rounds, guesses)
        renderer.present_separator()
