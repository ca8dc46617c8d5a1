from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Sequence

from ..cli import ScriptArgumentParser, check_arg_count, run_script
from ..core.context import RunContext
from ..core.logging import log_event
from ..exit_codes import OK
from ..paths.segments import format_segments, resolve_path, split_into_segments

SCRIPT_NAME = "split-path"
MAX_ARG_COUNT = 1
EXIT_CODES = ("OK", "ERR_INVALID_FLAG", "ERR_INVALID_ARG", "ERR_MISSING_ARG", "ERR_TOO_MANY_ARGS", "ERR_INTERNAL")

DESCRIPTION = """\
Split a path into the list of its ancestor directories, starting with the
path itself and ending with the filesystem root. Each segment is printed
followed by the delimiter. A relative path is resolved against the working
directory, no path means the working directory."""


@dataclass(frozen=True)
class SplitPathOptions:
    path: str
    reverse: bool
    delimiter: str

    @classmethod
    def from_args(cls, ns: argparse.Namespace) -> "SplitPathOptions":
        check_arg_count(ns.paths, MAX_ARG_COUNT)
        raw = ns.paths[0] if ns.paths else None
        return cls(path=resolve_path(raw, ns.lenient), reverse=ns.reverse, delimiter=ns.delimiter)


def build_parser() -> ScriptArgumentParser:
    p = ScriptArgumentParser(
        prog=SCRIPT_NAME,
        summary="split a path into its ancestor directories",
        description=DESCRIPTION,
        exit_codes=EXIT_CODES,
    )
    p.add_argument("-v", dest="verbose", action="store_true", help="Turn on verbose mode (increases output).")
    p.add_argument(
        "-l",
        dest="lenient",
        action="store_true",
        help="Lenient mode, an absolute path only has to start with '/' and doesn't have to exist.",
    )
    p.add_argument("-r", dest="reverse", action="store_true", help="Reverse the order, print the root first.")
    p.add_argument(
        "-d",
        dest="delimiter",
        metavar="delim",
        default="\n",
        help="Print 'delim' after every segment instead of a newline. It is inserted as-is.",
    )
    p.add_argument("paths", nargs="*", metavar="path", help="Path to split (default: working directory).")
    return p


def run_split_path(ctx: RunContext, ns: argparse.Namespace) -> int:
    opts = SplitPathOptions.from_args(ns)
    log_event(ctx, SCRIPT_NAME, "resolve", path=opts.path, reverse=opts.reverse)
    segments = split_into_segments(opts.path, reverse=opts.reverse)
    sys.stdout.write(format_segments(segments, opts.delimiter))
    return OK


def main(argv: Sequence[str] | None = None) -> int:
    return run_script(build_parser(), run_split_path, argv)


if __name__ == "__main__":
    raise SystemExit(main())
