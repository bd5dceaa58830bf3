"""
Shell output channels and the completion protocol shared by console commands.
"""

from __future__ import annotations

import sys
from typing import Iterable, Protocol, Sequence

from pydantic import BaseModel, Field

# ANSI escape codes for colored text
RED = "\033[91m"
RESET = "\033[0m"


class CompletionOption(BaseModel):
    """One completion candidate: text to insert plus a displayed hint."""
    value: str
    hint: str | None = None


class CompletionResult(BaseModel):
    """Completion candidates for the argument being typed.

    ``hint`` is a prompt label for the argument (e.g. "<name | ?>" or
    "<Integer32>"); it may be set without any options when free-form input
    is expected.
    """
    options: list[CompletionOption] = Field(default_factory=list)
    hint: str | None = None

    @classmethod
    def empty(cls) -> CompletionResult:
        return cls()

    @classmethod
    def from_hint(cls, hint: str) -> CompletionResult:
        return cls(hint=hint)

    @classmethod
    def from_options(
        cls,
        options: Iterable[CompletionOption],
        hint: str | None = None,
    ) -> CompletionResult:
        return cls(options=list(options), hint=hint)

    @property
    def is_empty(self) -> bool:
        return not self.options and self.hint is None


class ConsoleShell(Protocol):
    """Line-oriented output channel a command writes to."""

    def write_line(self, text: str) -> None: ...

    def write_error(self, text: str) -> None: ...


class ConsoleCommand(Protocol):
    """Interface a command must provide to be hosted."""

    command: str

    @property
    def description(self) -> str: ...

    @property
    def help(self) -> str: ...

    def execute(self, shell: ConsoleShell, args: Sequence[str]) -> None: ...

    def get_completion(self, args: Sequence[str]) -> CompletionResult: ...


class StdoutShell:
    """Writes output to stdout and errors to stderr in red."""

    def write_line(self, text: str) -> None:
        print(text)

    def write_error(self, text: str) -> None:
        print(f"{RED}{text}{RESET}", file=sys.stderr)


class BufferedShell:
    """Collects output and errors in memory."""

    def __init__(self):
        self.lines: list[str] = []
        self.errors: list[str] = []

    def write_line(self, text: str) -> None:
        self.lines.append(text)

    def write_error(self, text: str) -> None:
        self.errors.append(text)

    @property
    def output(self) -> str:
        return "\n".join(self.lines)

    def clear(self) -> None:
        self.lines.clear()
        self.errors.clear()
