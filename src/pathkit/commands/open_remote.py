from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from typing import Mapping, Sequence

from ..cli import ScriptArgumentParser, run_script
from ..config.loader import load_defaults
from ..core.context import RunContext
from ..errors import ScriptError
from ..exit_codes import ERR_INVALID_ARG, OK
from ..vcs.browser import Reader
from ..vcs.remote import open_remotes

SCRIPT_NAME = "open-remote"
EXIT_CODES = (
    "OK",
    "ERR_INVALID_FLAG",
    "ERR_INVALID_ARG",
    "ERR_MISSING_ARG",
    "ERR_GIT_UNAVAILABLE",
    "ERR_GIT_TOO_OLD",
    "ERR_NOT_A_WORKTREE",
    "ERR_REMOTE_NOT_FOUND",
    "ERR_BROWSER_UNAVAILABLE",
    "ERR_INTERNAL",
)

DESCRIPTION = """\
Open the remote URL of one or more git working trees in a browser. Every
path must exist, be inside a working tree and have the remote configured,
otherwise nothing is opened. All URLs are passed to a single browser
process that runs in the background.

The browser comes from '-b', then from the $BROWSER environment variable,
and is asked for interactively when neither is set."""


@dataclass(frozen=True)
class OpenRemoteOptions:
    paths: tuple[str, ...]
    remote: str
    browser: str | None
    min_git_version: str

    @classmethod
    def from_args(cls, ns: argparse.Namespace, environ: Mapping[str, str]) -> "OpenRemoteOptions":
        defaults = load_defaults()
        remote = ns.remote if ns.remote is not None else defaults.remote
        if not remote:
            raise ScriptError("remote name must not be empty", ERR_INVALID_ARG, "invalid_remote")
        browser = ns.browser if ns.browser is not None else (environ.get(defaults.browser_env) or None)
        return cls(
            paths=tuple(ns.paths) or (os.getcwd(),),
            remote=remote,
            browser=browser,
            min_git_version=defaults.min_git_version,
        )


def build_parser() -> ScriptArgumentParser:
    p = ScriptArgumentParser(
        prog=SCRIPT_NAME,
        summary="open git remote URLs in a browser",
        description=DESCRIPTION,
        exit_codes=EXIT_CODES,
    )
    p.add_argument("-v", dest="verbose", action="store_true", help="Turn on verbose mode (increases output).")
    p.add_argument("-b", dest="browser", metavar="browser", help="Browser command used to open the URLs.")
    p.add_argument("-r", dest="remote", metavar="remote", help="Name of the remote to open (default: origin).")
    p.add_argument(
        "paths", nargs="*", metavar="path", help="Paths inside git working trees (default: working directory)."
    )
    return p


def run_open_remote(
    ctx: RunContext,
    ns: argparse.Namespace,
    environ: Mapping[str, str] | None = None,
    read: Reader = input,
) -> int:
    opts = OpenRemoteOptions.from_args(ns, os.environ if environ is None else environ)
    open_remotes(opts.paths, opts.remote, opts.browser, opts.min_git_version, ctx, read)
    return OK


def main(argv: Sequence[str] | None = None) -> int:
    return run_script(build_parser(), run_open_remote, argv)


if __name__ == "__main__":
    raise SystemExit(main())
