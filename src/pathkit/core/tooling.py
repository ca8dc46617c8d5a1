"""External tool discovery and version ordering."""

from __future__ import annotations

import re
import shutil

from .process import run_command

_VERSION_TOKEN = re.compile(r"\d+(?:\.\d+)+")
_CHUNK = re.compile(r"(\d+)|(\D+)")


def is_cmd_available(cmd: str) -> bool:
    return shutil.which(cmd) is not None


def tool_version(tool: str) -> str:
    """Return the first dotted version found in `<tool> --version`, or "" when there is none."""
    res = run_command([tool, "--version"])
    if res.code != 0:
        return ""
    match = _VERSION_TOKEN.search(res.stdout)
    return match.group(0) if match else ""


def _version_key(version: str) -> tuple[tuple[int, int | str], ...]:
    # numeric runs sort numerically and before text runs, as `sort -V` does
    key: list[tuple[int, int | str]] = []
    for number, text in _CHUNK.findall(version.strip()):
        if number:
            key.append((0, int(number)))
        else:
            key.append((1, text))
    return tuple(key)


def compare_versions(v1: str, v2: str) -> bool:
    """True when `v1` is equal to or newer than `v2`."""
    return _version_key(v1) >= _version_key(v2)
