from __future__ import annotations

from dataclasses import dataclass

from .exit_codes import ERR_INTERNAL


@dataclass
class ScriptError(Exception):
    message: str
    code: int
    kind: str = "generic_error"

    def __str__(self) -> str:
        return self.message


class InternalError(ScriptError):
    """Contract violation inside pathkit itself, never a user error."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ERR_INTERNAL, "internal_error")
