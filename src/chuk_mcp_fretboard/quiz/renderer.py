"""
Renderers - the interaction boundary between a challenge and the solver.

The engine only needs four things: show a question, read a response, show
a hint, show a verdict (plus a separator between rounds). Any failure to
talk to the solver is raised as RendererError.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import Protocol, TextIO

from chuk_mcp_fretboard.constants import ErrorMessages, VerdictMessages
from chuk_mcp_fretboard.errors import InputClosedError, RendererError


class Renderer(Protocol):
    """Capability for presenting challenges and collecting responses."""

    def present_question(self, text: str) -> None: ...

    def read_response(self) -> str:
        """Read one response, trimmed and lower-cased."""
        ...

    def present_hint(self, text: str) -> None: ...

    def present_verdict(self, correct: bool) -> None: ...

    def present_separator(self) -> None: ...


class TextRenderer:
    """
    Renderer over a pair of text streams (a terminal by default).

    Questions, hints and verdicts are written as lines; the prompt is
    written without a newline and flushed before each read.
    """

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        prompt: str = "> ",
    ):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.prompt = prompt

    def _write(self, text: str) -> None:
        try:
            self.stdout.write(text)
            self.stdout.flush()
        except OSError as e:
            raise RendererError(str(e)) from e

    def present_question(self, text: str) -> None:
        self._write(f"{text}\n")

    def read_response(self) -> str:
        self._write(self.prompt)
        try:
            line = self.stdin.readline()
        except OSError as e:
            raise RendererError(str(e)) from e
        if not line:
            raise InputClosedError(ErrorMessages.INPUT_CLOSED)
        return line.strip().lower()

    def present_hint(self, text: str) -> None:
        self._write(f"{text}\n")

    def present_verdict(self, correct: bool) -> None:
        self._write(f"{VerdictMessages.CORRECT if correct else VerdictMessages.INCORRECT}\n")

    def present_separator(self) -> None:
        self._write("\n")


class ScriptedRenderer:
    """
    In-memory renderer fed from a fixed list of responses.

    Everything presented is recorded in `transcript` as (event, text)
    pairs. Running out of responses behaves like closed input.
    """

    def __init__(self, responses: Iterable[str] = ()):
        self._responses = list(responses)
        self.transcript: list[tuple[str, str]] = []

    @property
    def remaining(self) -> int:
        """Number of responses not yet read."""
        return len(self._responses)

    def events(self, kind: str) -> list[str]:
        """Texts recorded for one kind of event, in order."""
        return [text for event, text in self.transcript if event == kind]

    def present_question(self, text: str) -> None:
        self.transcript.append(("question", text))

    def read_response(self) -> str:
        if not self._responses:
            raise InputClosedError(ErrorMessages.INPUT_CLOSED)
        response = self._responses.pop(0)
        self.transcript.append(("response", response))
        return response.strip().lower()

    def present_hint(self, text: str) -> None:
        self.transcript.append(("hint", text))

    def present_verdict(self, correct: bool) -> None:
        self.transcript.append(
            ("verdict", VerdictMessages.CORRECT if correct else VerdictMessages.INCORRECT)
        )

    def present_separator(self) -> None:
        self.transcript.append(("separator", ""))
