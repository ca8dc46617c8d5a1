from __future__ import annotations

import sys
from pathlib import Path

import pytest
from pathkit.core.tooling import compare_versions, is_cmd_available, tool_version


@pytest.mark.parametrize(
    ("v1", "v2", "expected"),
    [
        ("2.7.0", "2.7.0", True),
        ("2.39.2", "2.7.0", True),
        ("2.10.0", "2.9.5", True),
        ("2.6.4", "2.7.0", False),
        ("1.9", "2.7.0", False),
        ("2.7", "2.7.0", False),
        ("2.7.0.1", "2.7.0", True),
        ("2.7.0-rc1", "2.7.0", True),
    ],
)
def test_compare_versions_orders_like_sort_v(v1: str, v2: str, expected: bool) -> None:
    assert compare_versions(v1, v2) is expected


def test_is_cmd_available() -> None:
    assert is_cmd_available(sys.executable)
    assert not is_cmd_available("pathkit-no-such-command-4f1e")


def _fake_tool(tmp_path: Path, output: str, code: int = 0) -> Path:
    tool = tmp_path / "fake-tool"
    tool.write_text(f"#!/bin/sh\necho '{output}'\nexit {code}\n", encoding="utf-8")
    tool.chmod(0o755)
    return tool


def test_tool_version_extracts_dotted_version(tmp_path: Path) -> None:
    tool = _fake_tool(tmp_path, "git version 2.39.2 (Apple Git-143)")
    assert tool_version(str(tool)) == "2.39.2"


def test_tool_version_is_empty_on_failure(tmp_path: Path) -> None:
    assert tool_version(str(_fake_tool(tmp_path, "boom", code=1))) == ""
    assert tool_version(str(_fake_tool(tmp_path, "no version here"))) == ""
