"""Shared command-line conventions for pathkit scripts."""
from .parser import ScriptArgumentParser, check_arg_count, print_manual
from .runner import run_script

__all__ = ["ScriptArgumentParser", "check_arg_count", "print_manual", "run_script"]
