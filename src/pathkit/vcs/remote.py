"""Resolve git remote URLs for local paths and hand them to a browser."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING, Sequence

from ..core.logging import log_event
from ..core.process import run_command
from ..core.tooling import compare_versions, is_cmd_available, tool_version
from ..errors import ScriptError
from ..exit_codes import (
    ERR_GIT_TOO_OLD,
    ERR_GIT_UNAVAILABLE,
    ERR_INVALID_ARG,
    ERR_NOT_A_WORKTREE,
    ERR_REMOTE_NOT_FOUND,
)
from .browser import Reader, check_browser, launch_browser, prompt_browser

if TYPE_CHECKING:
    from ..core.context import RunContext


def ensure_git(min_version: str, ctx: RunContext | None = None) -> str:
    if not is_cmd_available("git"):
        raise ScriptError("'git' is not available on this system", ERR_GIT_UNAVAILABLE, "git_unavailable")
    version = tool_version("git")
    # `git remote get-url` only exists since git 2.7.0
    if not version or not compare_versions(version, min_version):
        raise ScriptError(
            f"git {version or 'unknown'} is too old, {min_version} or newer is required",
            ERR_GIT_TOO_OLD,
            "git_too_old",
        )
    if ctx is not None:
        log_event(ctx, "open-remote", "git", version=version)
    return version


def _git_cwd(path: str) -> Path:
    target = Path(path)
    return target if target.is_dir() else target.parent


def resolve_remote_url(path: str, remote: str, ctx: RunContext | None = None) -> str:
    if not os.path.exists(path):
        raise ScriptError(f"path '{path}' doesn't exist", ERR_INVALID_ARG, "invalid_path")
    cwd = _git_cwd(path)
    inside = run_command(["git", "rev-parse", "--is-inside-work-tree"], cwd, ctx)
    if inside.code != 0 or inside.stdout.strip() != "true":
        raise ScriptError(f"path '{path}' is not inside a git working tree", ERR_NOT_A_WORKTREE, "not_a_worktree")
    res = run_command(["git", "remote", "get-url", remote], cwd, ctx)
    url = res.stdout.strip()
    if res.code != 0 or not url:
        raise ScriptError(f"remote '{remote}' not found for path '{path}'", ERR_REMOTE_NOT_FOUND, "remote_not_found")
    return url


def collect_remote_urls(paths: Sequence[str], remote: str, ctx: RunContext | None = None) -> list[str]:
    urls: list[str] = []
    for path in paths:
        url = resolve_remote_url(path, remote, ctx)
        if ctx is not None:
            log_event(ctx, "open-remote", "resolve", path=path, remote=remote, url=url)
        urls.append(url)
    return urls


def open_remotes(
    paths: Sequence[str],
    remote: str,
    browser: str | None,
    min_git_version: str,
    ctx: RunContext | None = None,
    read: Reader = input,
) -> list[str]:
    """Open the `remote` URL of every path in one browser call.

    Any failing path aborts the whole batch before the browser is started.
    A browser given up front is validated before any path is processed, the
    interactive prompt only runs once every URL resolved.
    """
    ensure_git(min_git_version, ctx)
    browser_argv = check_browser(browser) if browser is not None else None
    urls = collect_remote_urls(paths, remote, ctx)
    if browser_argv is None:
        browser_argv = prompt_browser(read)
    launch_browser(browser_argv, urls)
    if ctx is not None:
        log_event(ctx, "open-remote", "launch", browser=browser_argv[0], urls=len(urls))
    return urls
