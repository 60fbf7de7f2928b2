"""Core data models for ci-helpers."""

import shlex
from dataclasses import dataclass


@dataclass(frozen=True)
class Outcome:
    """Result of a helper call: success or failure, each with a message."""

    ok: bool
    message: str = ""

    @classmethod
    def success(cls, message: str = "") -> "Outcome":
        return cls(ok=True, message=message)

    @classmethod
    def failure(cls, message: str = "") -> "Outcome":
        return cls(ok=False, message=message)

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1

    def __bool__(self) -> bool:
        return self.ok


@dataclass
class CommandResult:
    """A single finished command invocation."""

    argv: list[str]
    returncode: int

    @property
    def failed(self) -> bool:
        return self.returncode != 0

    @property
    def description(self) -> str:
        """Shell-quoted command line, flattened onto one line."""
        return shlex.join(self.argv).replace("\r", "\\r").replace("\n", "\\n")
