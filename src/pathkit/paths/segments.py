"""Path resolution and ancestor segmentation.

`/a/b/c` splits into `/a/b/c`, `/a/b`, `/a`, `/` (nearest first).
"""

from __future__ import annotations

import os

from ..errors import InternalError, ScriptError
from ..exit_codes import ERR_INVALID_ARG

ROOT = "/"
SEP = "/"


def is_enterable(path: str) -> bool:
    return os.path.isdir(path) and os.access(path, os.X_OK)


def strip_trailing_separator(path: str) -> str:
    if path != ROOT and path.endswith(SEP):
        return path[:-1]
    return path


def resolve_path(arg: str | None, lenient: bool = False) -> str:
    """Turn a command-line path argument into a normalized absolute path.

    Relative paths must always be enterable directories, they are resolved the
    way `cd path && pwd` would resolve them. Absolute paths must be enterable
    unless `lenient` is set, in which case only the leading separator is checked.
    A missing argument means the working directory.
    """
    if arg is None:
        return strip_trailing_separator(os.getcwd())
    if not arg.startswith(SEP):
        candidate = os.path.join(os.getcwd(), arg)
        if not arg or not is_enterable(candidate):
            raise ScriptError(f"can't enter directory '{arg}'", ERR_INVALID_ARG, "invalid_path")
        return strip_trailing_separator(os.path.normpath(candidate))
    if not lenient and not is_enterable(arg):
        raise ScriptError(f"can't enter directory '{arg}'", ERR_INVALID_ARG, "invalid_path")
    return strip_trailing_separator(arg)


def split_into_segments(path: str, reverse: bool = False) -> list[str]:
    if not path.startswith(SEP):
        raise InternalError(f"split_into_segments() expects an absolute path, got '{path}'")
    current = strip_trailing_separator(path)
    if current == ROOT:
        return [ROOT]
    segments: list[str] = []
    # every ancestor loses its trailing separator too, so `/a//b` yields `/a`, never `/a/`
    while current and current != ROOT:
        segments.append(current)
        current = strip_trailing_separator(current.rpartition(SEP)[0])
    segments.append(ROOT)
    if reverse:
        segments.reverse()
    return segments


def format_segments(segments: list[str], delimiter: str = "\n") -> str:
    return "".join(f"{segment}{delimiter}" for segment in segments)
