from __future__ import annotations

import argparse
from typing import Callable, Sequence

from ..core.context import RunContext
from ..core.logging import log_error, log_internal_error
from ..errors import InternalError, ScriptError
from ..exit_codes import ERR_INTERNAL

Handler = Callable[[RunContext, argparse.Namespace], int]


def run_script(parser: argparse.ArgumentParser, handler: Handler, argv: Sequence[str] | None = None) -> int:
    try:
        ns = parser.parse_args(argv)
        ctx = RunContext.from_args(parser.prog, ns)
        return handler(ctx, ns)
    except SystemExit as exc:
        # `-h` exits from inside argparse once the manual is printed
        return exc.code if isinstance(exc.code, int) else 0
    except InternalError as exc:
        log_internal_error(str(exc))
        return exc.code
    except ScriptError as exc:
        log_error(str(exc))
        return exc.code
    except Exception as exc:  # pragma: no cover
        log_internal_error(f"{type(exc).__name__}: {exc}")
        return ERR_INTERNAL
