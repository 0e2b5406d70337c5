#!/usr/bin/env python3
"""
Async Fretboard MCP Server using chuk-mcp-server

This server exposes the fretboard drill as MCP tools. Each guess is one
tool call, judged with the same rules as the terminal quiz.

The server provides tools for:
- Opening challenges (fret, note, string, tuning, mode, scale, interval)
- Submitting guesses and peeking at answers
- Listing tunings and building diatonic scales
"""

from __future__ import annotations

import logging
import random
from typing import Any

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_fretboard.config import QuizConfig
from chuk_mcp_fretboard.quiz import ChallengeGenerator, ChallengeManager
from chuk_mcp_fretboard.tools import register_quiz_tools

logger = logging.getLogger(__name__)

SERVER_NAME = "chuk-mcp-fretboard"


def build_server(config: QuizConfig) -> tuple[ChukMCPServer, dict[str, Any]]:
    """
    Create the MCP server with all quiz tools registered.

    Args:
        config: Quiz configuration (default tuning, seed)

    Returns:
        The server and its registered tool functions
    """
    mcp = ChukMCPServer(SERVER_NAME)

    challenge_manager = ChallengeManager(
        generator=ChallengeGenerator(random.Random(config.seed)),
        default_tuning=config.tuning,
    )
    tools = register_quiz_tools(mcp, challenge_manager)

    logger.info("CHUK Fretboard MCP Server initialized")
    logger.info(f"  Default tuning: {config.tuning.value}")
    logger.info(f"  Tools: {', '.join(sorted(tools))}")
    return mcp, tools
