from __future__ import annotations

import sys
from pathlib import Path

import pytest
from pathkit.core.context import RunContext
from pathkit.core.process import run_command


def test_run_command_captures_output_and_duration(tmp_path: Path) -> None:
    res = run_command([sys.executable, "-c", "import os; print(os.getcwd())"], tmp_path)
    assert res.code == 0
    assert res.stdout.strip() == str(tmp_path.resolve())
    assert res.duration_ms >= 0


def test_run_command_reports_failure(tmp_path: Path) -> None:
    res = run_command([sys.executable, "-c", "import sys; sys.stderr.write('nope'); sys.exit(3)"], tmp_path)
    assert res.code == 3
    assert res.combined_output == "nope"


def test_run_command_logs_when_verbose(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    run_command([sys.executable, "-c", "pass"], tmp_path, RunContext("t", verbose=True))
    out = capsys.readouterr().out
    assert out.startswith("[VERBOSE] - process:run-command code=0 command=")
