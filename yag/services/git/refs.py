"""Branches, revisions, commit messages and config values of the local repo."""

from pathlib import Path

from yag.errors import GitRunnerError
from yag.services.git._run import _run_git


def get_current_branch(repo_dir: Path | None = None) -> str:
    """Name of the checked-out branch."""
    branch = _run_git(["branch", "--show-current"], cwd=repo_dir)
    if not branch:
        raise GitRunnerError("not on a branch (detached HEAD)")
    return branch


def get_rev(ref: str, repo_dir: Path | None = None) -> str:
    """Commit sha a ref points to."""
    return _run_git(["rev-parse", ref], cwd=repo_dir)


def get_latest_commit_message(repo_dir: Path | None = None) -> str:
    """Subject line of the latest commit."""
    return _run_git(["log", "-1", "--pretty=%s"], cwd=repo_dir)


def get_git_config(key: str, repo_dir: Path | None = None) -> str | None:
    """Value of a git config key, or None when unset."""
    try:
        value = _run_git(["config", key], cwd=repo_dir)
    except GitRunnerError:
        return None
    return value or None
