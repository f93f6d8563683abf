"""Git operations: origin remote, branches, revisions, config."""

from yag.errors import GitRunnerError
from yag.services.git.refs import (
    get_current_branch,
    get_git_config,
    get_latest_commit_message,
    get_rev,
)
from yag.services.git.remote import get_remote, get_remote_url, parse_remote_url

__all__ = [
    "GitRunnerError",
    "get_current_branch",
    "get_git_config",
    "get_latest_commit_message",
    "get_remote",
    "get_remote_url",
    "get_rev",
    "parse_remote_url",
]
