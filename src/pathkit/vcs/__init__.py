from .browser import check_browser, launch_browser, prompt_browser
from .remote import collect_remote_urls, ensure_git, open_remotes, resolve_remote_url

__all__ = [
    "check_browser",
    "collect_remote_urls",
    "ensure_git",
    "launch_browser",
    "open_remotes",
    "prompt_browser",
    "resolve_remote_url",
]
