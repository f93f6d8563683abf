"""Command handlers for `yag pr` and `yag profile`."""

from yag.commands.pr import PullRequestCommand
from yag.commands.profile import ProfileCommand

__all__ = ["ProfileCommand", "PullRequestCommand"]
