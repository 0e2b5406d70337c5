#!/usr/bin/env python3
"""
Example: Drive a quiz from a script instead of a terminal.

This demonstrates the renderer boundary - the same loop that runs in the
terminal, fed from a fixed list of responses and recorded as a transcript.

Usage:
    python examples/scripted_session.py
"""

import random

from chuk_mcp_fretboard.constants import QuizKind
from chuk_mcp_fretboard.core import Guitar, Tuning
from chuk_mcp_fretboard.quiz import ChallengeGenerator, ScriptedRenderer, issue


def main() -> None:
    """Ask one challenge of each kind and answer via peek."""
    generator = ChallengeGenerator(random.Random(2019))
    guitar = Guitar(Tuning.DADGBE)

    for kind in QuizKind:
        challenge = generator.generate(kind, guitar)

        # Peek first, then answer with the revealed value
        answer = challenge.peek().split("(", 1)[1].rstrip(")")
        renderer = ScriptedRenderer(["wrong", "peek", answer])
        guesses = issue(challenge, renderer)

        print(f"[{kind.value}] ({guesses} guesses)")
        for event, text in renderer.transcript:
            print(f"  {event:>9}: {text}")
        print()


if __name__ == "__main__":
    main()
