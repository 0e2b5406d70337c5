"""
Quiz configuration.

Settings come from built-in defaults, optionally overridden by a YAML file
and then by command-line flags. Example file:

    tuning: DADGBE
    kinds: [frets, notes]
    seed: 42
    prompt: "? "
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from chuk_mcp_fretboard.constants import ALL_KINDS, QuizKind
from chuk_mcp_fretboard.core.guitar import Tuning

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "fretboard.yaml"


class QuizConfig(BaseModel):
    """Settings for a quiz session."""

    tuning: Tuning = Field(Tuning.EADGBE, description="Guitar tuning")
    kinds: list[QuizKind] = Field(
        default_factory=lambda: list(ALL_KINDS),
        description="Quiz kinds drawn from when no kind is selected",
    )
    seed: int | None = Field(None, description="Random seed for repeatable sessions")
    prompt: str = Field("> ", description="Prompt shown before each response")

    model_config = {"frozen": True}

    @field_validator("tuning", mode="before")
    @classmethod
    def parse_tuning(cls, v: Any) -> Any:
        """Accept tuning names in any case."""
        if isinstance(v, str):
            return Tuning.parse(v)
        return v

    @field_validator("kinds")
    @classmethod
    def validate_kinds(cls, v: list[QuizKind]) -> list[QuizKind]:
        """At least one kind is needed to pick from."""
        if not v:
            raise ValueError("At least one quiz kind is required")
        return v


def load_config(path: Path | None = None) -> QuizConfig:
    """
    Load quiz configuration from YAML.

    Args:
        path: Config file. If None, ./fretboard.yaml is read when present,
            otherwise defaults are used.

    Returns:
        The validated configuration

    Raises:
        FileNotFoundError: if an explicit path does not exist
    """
    if path is None:
        path = Path.cwd() / DEFAULT_CONFIG_NAME
        if not path.exists():
            return QuizConfig()
    elif not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    logger.debug("Loaded config from %s", path)
    return QuizConfig.model_validate(data)
