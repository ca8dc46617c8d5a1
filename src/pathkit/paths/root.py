from __future__ import annotations

import os
from typing import TYPE_CHECKING, Iterable, Sequence

from ..core.logging import log_event
from ..errors import ScriptError
from ..exit_codes import ERR_INVALID_ARG
from .segments import split_into_segments

if TYPE_CHECKING:
    from ..core.context import RunContext


def normalize_indicators(names: Iterable[str], default: Sequence[str]) -> tuple[str, ...]:
    """Explicit names replace the default set entirely; duplicates keep their first position."""
    picked = tuple(dict.fromkeys(names))
    if any(not name for name in picked):
        raise ScriptError("indicator names must not be empty", ERR_INVALID_ARG, "invalid_indicator")
    return picked or tuple(default)


def has_indicator(directory: str, indicators: Sequence[str]) -> bool:
    return any(os.path.exists(os.path.join(directory, name)) for name in indicators)


def find_root(start: str, indicators: Sequence[str], ctx: RunContext | None = None) -> str | None:
    for directory in split_into_segments(start):
        if ctx is not None:
            log_event(ctx, "find-root", "scan", directory=directory)
        if has_indicator(directory, indicators):
            return directory
    return None
