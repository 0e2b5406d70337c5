#!/usr/bin/env python3
"""
Entry point for the terminal fretboard quiz.

Usage:
    fretboard-quiz              # random kind each round
    fretboard-quiz frets        # one kind, round after round
    fretboard-quiz notes --tuning DADGBE --seed 7

Type 'peek' at the prompt to see the answer. End input (Ctrl-D) to quit.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

from chuk_mcp_fretboard.config import QuizConfig, load_config
from chuk_mcp_fretboard.constants import QuizKind
from chuk_mcp_fretboard.core import Tuning
from chuk_mcp_fretboard.errors import InputClosedError, RendererError
from chuk_mcp_fretboard.quiz import ChallengeGenerator, TextRenderer, run_forever

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Argument parser for the quiz."""
    parser = argparse.ArgumentParser(description="Guitar fretboard and theory drill")
    parser.add_argument(
        "kind",
        nargs="?",
        choices=[k.value for k in QuizKind],
        default=None,
        help="Quiz kind (default: a random kind each round)",
    )
    parser.add_argument(
        "--tuning",
        choices=[t.value for t in Tuning],
        type=str.upper,
        default=None,
        help="Guitar tuning (overrides config, default: EADGBE)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML quiz config (default: ./fretboard.yaml if present)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for a repeatable session",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> QuizConfig:
    """Load the config file and apply command-line overrides."""
    config = load_config(args.config)

    overrides: dict[str, object] = {}
    if args.tuning is not None:
        overrides["tuning"] = Tuning(args.tuning)
    if args.seed is not None:
        overrides["seed"] = args.seed

    return config.model_copy(update=overrides) if overrides else config


def main(argv: list[str] | None = None) -> int:
    """
    Run the quiz until input closes.

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.WARNING)
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    config = resolve_config(args)
    kind = QuizKind.parse(args.kind) if args.kind else None
    generator = ChallengeGenerator(random.Random(config.seed))
    renderer = TextRenderer(prompt=config.prompt)

    logger.debug("Starting quiz: kind=%s tuning=%s", kind, config.tuning.value)
    try:
        run_forever(config, renderer, generator, kind)
    except InputClosedError:
        logger.debug("Input closed, ending quiz")
        return 0
    except RendererError:
        logger.exception("Lost contact with the terminal")
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
