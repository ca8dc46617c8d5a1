from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest
from hypothesis import HealthCheck, settings

_ALLOWED_MARKERS = {"unit", "integration", "slow"}

settings.register_profile("pathkit", deadline=None, suppress_health_check=[HealthCheck.too_slow])
settings.load_profile("pathkit")


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        names = {mark.name for mark in item.iter_markers()}
        if not names.intersection(_ALLOWED_MARKERS):
            item.add_marker("unit")


@pytest.fixture
def git_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    # keep git from discovering repositories above the test directory
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    return tmp_path


@pytest.fixture
def make_repo(git_env: Path):
    def _make(name: str, remotes: dict[str, str] | None = None) -> Path:
        repo = git_env / name
        repo.mkdir(parents=True)
        subprocess.run(["git", "init", "-q", str(repo)], check=True)
        for remote, url in (remotes or {}).items():
            subprocess.run(["git", "-C", str(repo), "remote", "add", remote, url], check=True)
        return repo

    return _make
