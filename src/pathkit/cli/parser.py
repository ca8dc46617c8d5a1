"""POSIX-style flag parsing on top of argparse.

Every pathkit script uses single-dash flags, answers `-h` with a manual page
before any other validation, and reports parse failures with the shared exit
codes instead of argparse's blanket status 2.
"""

from __future__ import annotations

import argparse
import re
import sys
import textwrap
from typing import Any, Sequence

from ..errors import ScriptError
from ..exit_codes import ERR_INVALID_ARG, ERR_INVALID_FLAG, ERR_MISSING_ARG, ERR_TOO_MANY_ARGS, describe

_MISSING_VALUE = re.compile(r"argument (?P<flag>-\S+?)(?:/\S+)?: expected (?:one|\d+) arguments?")
_UNRECOGNIZED = re.compile(r"unrecognized arguments: (?P<args>.+)")
_INDENT = " " * 6


class _ManualAction(argparse.Action):
    def __init__(self, option_strings: Sequence[str], dest: str = argparse.SUPPRESS, help: str | None = None) -> None:
        super().__init__(option_strings=option_strings, dest=dest, default=argparse.SUPPRESS, nargs=0, help=help)

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        print_manual(parser)
        parser.exit(0)


class ScriptArgumentParser(argparse.ArgumentParser):
    def __init__(self, prog: str, summary: str, description: str, exit_codes: tuple[str, ...]) -> None:
        super().__init__(prog=prog, description=description, add_help=False, allow_abbrev=False)
        self.summary = summary
        self.exit_codes = exit_codes
        self.add_argument("-h", action=_ManualAction, help="Get help, print out the manual and exit.")

    def _flag_arity(self) -> dict[str, int]:
        arity: dict[str, int] = {}
        for action in self._actions:
            for option in action.option_strings:
                if len(option) == 2 and action.nargs in (0, None):
                    arity[option[1]] = 0 if action.nargs == 0 else 1
        return arity

    def fold_option_values(self, argv: Sequence[str]) -> list[str]:
        """Attach the value of a single-dash option to its flag, as getopts reads it.

        `-d ->` becomes `-d->` so argparse never mistakes a value starting with
        `-` for another flag. Clusters such as `-ld ->` are handled the same way.
        """
        arity = self._flag_arity()
        out: list[str] = []
        idx = 0
        while idx < len(argv):
            token = argv[idx]
            idx += 1
            out.append(token)
            if token == "--":
                out.extend(argv[idx:])
                break
            if len(token) < 2 or token[0] != "-" or token[1] == "-":
                continue
            for pos, char in enumerate(token[1:], start=1):
                kind = arity.get(char)
                if kind is None:
                    break
                if kind == 1:
                    if pos == len(token) - 1 and idx < len(argv) and argv[idx].startswith("-"):
                        out[-1] = token + argv[idx]
                        idx += 1
                    break
        return out

    def parse_args(  # type: ignore[override]
        self, args: Sequence[str] | None = None, namespace: argparse.Namespace | None = None
    ) -> argparse.Namespace:
        # flags and positionals may come in any order
        argv = list(sys.argv[1:] if args is None else args)
        return self.parse_intermixed_args(self.fold_option_values(argv), namespace)

    def error(self, message: str) -> None:  # type: ignore[override]
        missing = _MISSING_VALUE.search(message)
        if missing:
            raise ScriptError(f"flag '{missing.group('flag')}' requires argument", ERR_MISSING_ARG, "missing_arg")
        unrecognized = _UNRECOGNIZED.search(message)
        if unrecognized:
            extras = unrecognized.group("args").split()
            flags = [arg for arg in extras if arg.startswith("-") and arg != "-"]
            if flags:
                raise ScriptError(f"invalid flag '{flags[0]}' supplied", ERR_INVALID_FLAG, "invalid_flag")
            raise ScriptError(f"unexpected argument '{extras[0]}' supplied", ERR_INVALID_ARG, "invalid_arg")
        raise ScriptError(message, ERR_INVALID_FLAG, "invalid_flag")


def _option_lines(parser: argparse.ArgumentParser) -> list[str]:
    lines: list[str] = []
    for action in parser._actions:
        if not action.option_strings:
            continue
        flag = action.option_strings[0]
        if action.nargs != 0 and action.metavar:
            flag = f"{flag} <{action.metavar}>"
        lines.append(f"{_INDENT}{flag}")
        for chunk in textwrap.wrap(action.help or "", width=70):
            lines.append(f"{_INDENT}    {chunk}")
        lines.append("")
    return lines


def render_manual(parser: ScriptArgumentParser) -> str:
    synopsis = parser.format_usage().strip()
    if synopsis.startswith("usage: "):
        synopsis = synopsis[len("usage: ") :]
    out = [
        "NAME",
        f"{_INDENT}{parser.prog} - {parser.summary}",
        "",
        "SYNOPSIS",
        f"{_INDENT}{synopsis}",
        "",
        "DESCRIPTION",
        *[f"{_INDENT}{line}" if line else "" for line in (parser.description or "").strip().splitlines()],
        "",
        "OPTIONS",
        *_option_lines(parser),
        "EXIT CODES",
        f"{_INDENT}Exit code indicates whether {parser.prog} successfully executed, or failed for some reason.",
        f"{_INDENT}Different exit codes indicate different failure causes:",
        "",
    ]
    for code, text in describe(parser.exit_codes):
        out.append(f"{_INDENT}{code:<3} {text}")
    return "\n".join(out).rstrip() + "\n"


def print_manual(parser: argparse.ArgumentParser) -> None:
    if not isinstance(parser, ScriptArgumentParser):
        parser.print_help(sys.stdout)
        return
    sys.stdout.write(render_manual(parser))


def check_arg_count(args: Sequence[str], max_count: int) -> None:
    if len(args) > max_count:
        raise ScriptError(
            f"too many arguments supplied (max number: {max_count})",
            ERR_TOO_MANY_ARGS,
            "too_many_args",
        )
