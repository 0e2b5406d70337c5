"""
Challenge Manager - open challenges for request/response surfaces.

Where the terminal engine blocks on one challenge at a time, a tool server
receives each guess as a separate call. The manager keeps the open
challenges by id and judges guesses against them with the same rules.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass

from chuk_mcp_fretboard.constants import PEEK, ErrorMessages, QuizKind
from chuk_mcp_fretboard.core.guitar import Guitar, Tuning
from chuk_mcp_fretboard.errors import ChallengeNotFoundError
from chuk_mcp_fretboard.models.challenge import Challenge
from chuk_mcp_fretboard.quiz.generator import ChallengeGenerator

logger = logging.getLogger(__name__)

DEFAULT_MAX_OPEN = 256


@dataclass(frozen=True)
class GuessResult:
    """Outcome of one submitted response."""

    challenge_id: str
    correct: bool
    hint: str | None = None
    attempts: int = 0

    @property
    def closed(self) -> bool:
        """The challenge was answered and is no longer open."""
        return self.correct


class ChallengeManager:
    """
    Manages open challenges.

    A challenge stays open until it is answered correctly or discarded.
    At most `max_open` challenges are kept; opening one more evicts the
    oldest.
    """

    def __init__(
        self,
        generator: ChallengeGenerator | None = None,
        default_tuning: Tuning = Tuning.EADGBE,
        max_open: int = DEFAULT_MAX_OPEN,
    ):
        """
        Initialize the manager.

        Args:
            generator: Source of challenges (default: unseeded generator)
            default_tuning: Tuning used when a request names none
            max_open: Cap on open challenges (oldest evicted first)
        """
        if max_open < 1:
            raise ValueError(f"max_open must be at least 1, got {max_open}")
        self.generator = generator or ChallengeGenerator()
        self.default_tuning = default_tuning
        self.max_open = max_open
        self._open: dict[str, Challenge] = {}
        self._attempts: dict[str, int] = {}

    def create(
        self,
        kind: QuizKind | None = None,
        tuning: Tuning | None = None,
    ) -> tuple[str, Challenge]:
        """
        Create and open a new challenge.

        Args:
            kind: Quiz kind, or None for a random kind
            tuning: Tuning for fretboard kinds (default: manager default)

        Returns:
            The new challenge id and the challenge
        """
        guitar = Guitar(tuning or self.default_tuning)
        if kind is None:
            challenge = self.generator.generate_any(guitar)
        else:
            challenge = self.generator.generate(kind, guitar)

        # Dicts keep insertion order, so the first key is the oldest
        while len(self._open) >= self.max_open:
            oldest = next(iter(self._open))
            self.discard(oldest)
            logger.debug("Evicted abandoned challenge %s", oldest)

        challenge_id = uuid.uuid4().hex[:12]
        self._open[challenge_id] = challenge
        self._attempts[challenge_id] = 0
        logger.debug("Opened challenge %s", challenge_id)
        return challenge_id, challenge

    def get(self, challenge_id: str) -> Challenge:
        """
        Get an open challenge.

        Raises:
            ChallengeNotFoundError: if no open challenge has this id
        """
        if challenge_id not in self._open:
            raise ChallengeNotFoundError(
                ErrorMessages.CHALLENGE_NOT_FOUND.format(challenge_id=challenge_id)
            )
        return self._open[challenge_id]

    def peek(self, challenge_id: str) -> str:
        """Reveal the answer of an open challenge without closing it."""
        return self.get(challenge_id).peek()

    def submit(self, challenge_id: str, guess: str) -> GuessResult:
        """
        Submit a response to an open challenge.

        'peek' returns the hint and judges nothing. A correct guess closes
        the challenge; an incorrect or malformed one leaves it open.
        """
        challenge = self.get(challenge_id)
        response = guess.strip().lower()

        if response == PEEK:
            return GuessResult(
                challenge_id=challenge_id,
                correct=False,
                hint=challenge.peek(),
                attempts=self._attempts[challenge_id],
            )

        correct = challenge.validate_guess(response)
        self._attempts[challenge_id] += 1
        attempts = self._attempts[challenge_id]
        if correct:
            self.discard(challenge_id)
            logger.debug("Challenge %s answered after %d guesses", challenge_id, attempts)

        return GuessResult(challenge_id=challenge_id, correct=correct, attempts=attempts)

    def discard(self, challenge_id: str) -> bool:
        """
        Close a challenge.

        Returns:
            True if the challenge was open
        """
        self._attempts.pop(challenge_id, None)
        return self._open.pop(challenge_id, None) is not None

    def list_open(self) -> list[str]:
        """Ids of all open challenges."""
        return list(self._open)
