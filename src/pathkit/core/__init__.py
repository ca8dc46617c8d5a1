"""pathkit core helpers."""
from .context import RunContext
from .logging import log_error, log_event, log_info, log_internal_error, log_warning
from .process import CommandResult, run_command
from .tooling import compare_versions, is_cmd_available, tool_version

__all__ = [
    "CommandResult",
    "RunContext",
    "compare_versions",
    "is_cmd_available",
    "log_error",
    "log_event",
    "log_info",
    "log_internal_error",
    "log_warning",
    "run_command",
    "tool_version",
]
