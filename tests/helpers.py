from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def run_pathkit(
    command: str,
    *args: str,
    cwd: Path | None = None,
    env: dict[str, str] | None = None,
    stdin: str | None = None,
) -> subprocess.CompletedProcess[str]:
    full_env = os.environ.copy()
    full_env["PYTHONPATH"] = str(ROOT / "src")
    full_env.update(env or {})
    module = command.replace("-", "_")
    return subprocess.run(
        [sys.executable, "-m", f"pathkit.commands.{module}", *args],
        cwd=(cwd or ROOT),
        env=full_env,
        input=stdin,
        text=True,
        capture_output=True,
        check=False,
    )
