from __future__ import annotations

from .config.loader import load_json_config


def _load_registry() -> dict[str, int]:
    payload = load_json_config("error-registry.json")
    mapping: dict[str, int] = {}
    for row in payload.get("codes", []):
        mapping[str(row["name"])] = int(row["code"])
    return mapping


_REG = _load_registry()

OK = _REG["OK"]
ERR_INVALID_FLAG = _REG["ERR_INVALID_FLAG"]
ERR_INVALID_ARG = _REG["ERR_INVALID_ARG"]
ERR_MISSING_ARG = _REG["ERR_MISSING_ARG"]
ERR_TOO_MANY_ARGS = _REG["ERR_TOO_MANY_ARGS"]
ERR_INTERNAL = _REG["ERR_INTERNAL"]

# script-specific, codes overlap between scripts
ERR_ROOT_NOT_FOUND = _REG["ERR_ROOT_NOT_FOUND"]
ERR_GIT_UNAVAILABLE = _REG["ERR_GIT_UNAVAILABLE"]
ERR_GIT_TOO_OLD = _REG["ERR_GIT_TOO_OLD"]
ERR_NOT_A_WORKTREE = _REG["ERR_NOT_A_WORKTREE"]
ERR_REMOTE_NOT_FOUND = _REG["ERR_REMOTE_NOT_FOUND"]
ERR_BROWSER_UNAVAILABLE = _REG["ERR_BROWSER_UNAVAILABLE"]


def describe(names: tuple[str, ...]) -> list[tuple[int, str]]:
    """Return `(code, description)` rows for the named registry entries, in registry order."""
    payload = load_json_config("error-registry.json")
    return [(int(row["code"]), str(row["description"])) for row in payload.get("codes", []) if row["name"] in names]
