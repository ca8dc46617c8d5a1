from __future__ import annotations

import shlex
import subprocess
from typing import Callable, Sequence

from ..core.logging import log_warning
from ..core.tooling import is_cmd_available
from ..errors import ScriptError
from ..exit_codes import ERR_BROWSER_UNAVAILABLE

Reader = Callable[[str], str]
PROMPT = "browser command: "


def _split(value: str) -> list[str]:
    try:
        return shlex.split(value)
    except ValueError:
        return []


def check_browser(value: str) -> list[str]:
    argv = _split(value)
    if not argv or not is_cmd_available(argv[0]):
        raise ScriptError(f"browser '{value}' is not available", ERR_BROWSER_UNAVAILABLE, "browser_unavailable")
    return argv


def prompt_browser(read: Reader = input) -> list[str]:
    """Ask for a browser command until one resolves on this system."""
    while True:
        try:
            value = read(PROMPT)
        except EOFError:
            raise ScriptError("no browser supplied", ERR_BROWSER_UNAVAILABLE, "browser_unavailable") from None
        argv = _split(value)
        if argv and is_cmd_available(argv[0]):
            return argv
        log_warning(f"browser '{value.strip()}' is not available, try again")


def launch_browser(argv: Sequence[str], urls: Sequence[str]) -> subprocess.Popen[bytes]:
    # detached, nobody waits on it
    return subprocess.Popen(
        [*argv, *urls],
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        start_new_session=True,
    )
