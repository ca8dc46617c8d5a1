"""Severity-tagged, single-line diagnostics shared by every pathkit command.

Errors go to stderr; warnings, informational and verbose lines go to stdout.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .context import RunContext


def _line(tag: str, message: str) -> str:
    return f"[{tag}] - {message}\n"


def log_error(message: str) -> None:
    sys.stderr.write(_line("ERROR", message))


def log_internal_error(message: str) -> None:
    sys.stderr.write(_line("INTERNAL_ERROR", message))


def log_warning(message: str) -> None:
    sys.stdout.write(_line("WARNING", message))


def log_info(message: str) -> None:
    sys.stdout.write(_line("INFO", message))


def log_event(ctx: RunContext, component: str, action: str, **fields: object) -> None:
    if not ctx.verbose:
        return
    core = f"{component}:{action}"
    extras = " ".join(f"{key}={value}" for key, value in sorted(fields.items()))
    sys.stdout.write(_line("VERBOSE", core if not extras else f"{core} {extras}"))
