from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Sequence

from ..cli import ScriptArgumentParser, run_script
from ..config.loader import load_defaults
from ..core.context import RunContext
from ..core.logging import log_error, log_event, log_info
from ..exit_codes import ERR_ROOT_NOT_FOUND, OK
from ..paths.root import find_root, normalize_indicators
from ..paths.segments import resolve_path

SCRIPT_NAME = "find-root"
EXIT_CODES = ("OK", "ERR_INVALID_FLAG", "ERR_INVALID_ARG", "ERR_MISSING_ARG", "ERR_ROOT_NOT_FOUND", "ERR_INTERNAL")

DESCRIPTION = """\
Find the project root: walk from the start path up to the filesystem root
and print the first directory that directly contains any of the indicator
files or directories. Indicator names given as arguments replace the
default list ('.git'), they are not added to it."""


@dataclass(frozen=True)
class FindRootOptions:
    start: str
    indicators: tuple[str, ...]
    lenient: bool
    quiet: bool

    @classmethod
    def from_args(cls, ns: argparse.Namespace) -> "FindRootOptions":
        return cls(
            start=resolve_path(ns.path, ns.lenient),
            indicators=normalize_indicators(ns.indicators, load_defaults().indicators),
            lenient=ns.lenient,
            quiet=ns.quiet,
        )


def build_parser() -> ScriptArgumentParser:
    p = ScriptArgumentParser(
        prog=SCRIPT_NAME,
        summary="find the nearest ancestor directory holding a root indicator",
        description=DESCRIPTION,
        exit_codes=EXIT_CODES,
    )
    p.add_argument("-v", dest="verbose", action="store_true", help="Turn on verbose mode (increases output).")
    p.add_argument(
        "-l",
        dest="lenient",
        action="store_true",
        help="Lenient mode, an absolute start path doesn't have to exist and a missing root is reported as "
        "information with exit code 0. A relative start path must still be an enterable directory.",
    )
    p.add_argument("-q", dest="quiet", action="store_true", help="Quiet mode, don't report a missing root.")
    p.add_argument("-p", dest="path", metavar="path", help="Start the search at 'path' (default: working directory).")
    p.add_argument("indicators", nargs="*", metavar="indicator", help="File or directory names marking a root.")
    return p


def report_not_found(opts: FindRootOptions) -> int:
    message = f"root directory not found (indicators: {', '.join(opts.indicators)})"
    if opts.lenient:
        if not opts.quiet:
            log_info(message)
        return OK
    if not opts.quiet:
        log_error(message)
    return ERR_ROOT_NOT_FOUND


def run_find_root(ctx: RunContext, ns: argparse.Namespace) -> int:
    opts = FindRootOptions.from_args(ns)
    log_event(ctx, SCRIPT_NAME, "start", path=opts.start, indicators=",".join(opts.indicators))
    root = find_root(opts.start, opts.indicators, ctx)
    if root is None:
        return report_not_found(opts)
    print(root)
    return OK


def main(argv: Sequence[str] | None = None) -> int:
    return run_script(build_parser(), run_find_root, argv)


if __name__ == "__main__":
    raise SystemExit(main())
