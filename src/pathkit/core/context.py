from __future__ import annotations

import argparse
from dataclasses import dataclass


@dataclass(frozen=True)
class RunContext:
    script: str
    verbose: bool = False

    @classmethod
    def from_args(cls, script: str, ns: argparse.Namespace) -> "RunContext":
        return cls(script=script, verbose=bool(getattr(ns, "verbose", False)))
