from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any


def meta_root() -> Path:
    return Path(__file__).resolve().parents[1] / "_meta"


def load_json_config(name: str) -> dict[str, Any]:
    path = meta_root() / name
    return json.loads(path.read_text(encoding="utf-8"))


@dataclass(frozen=True)
class Defaults:
    indicators: tuple[str, ...]
    remote: str
    min_git_version: str
    browser_env: str


@lru_cache(maxsize=1)
def load_defaults() -> Defaults:
    payload = load_json_config("defaults.json")
    return Defaults(
        indicators=tuple(str(name) for name in payload["indicators"]),
        remote=str(payload["remote"]),
        min_git_version=str(payload["min_git_version"]),
        browser_env=str(payload["browser_env"]),
    )
