"""`yag pr` (alias `mr`): get, list, create, close and open pull requests."""

import argparse
import logging
import webbrowser
from typing import Callable

from yag.adapters.base import Repository
from yag.adapters.factory import resolve
from yag.config import AppConfig
from yag.errors import GitRunnerError, YagError
from yag.models import ListOptions, PaginationResult, PullRequest
from yag.services.git import get_current_branch, get_git_config, get_latest_commit_message, get_rev

TARGET_CONFIG_KEY = "yag.pr.target"

LOG = logging.getLogger("yag.commands.pr")


def render_page(result: PaginationResult, page: int, page_size: int) -> str:
    """Summary line per item and a page/total footer."""
    lines = [pr.summary() for pr in result.items]
    pages = max(1, -(-result.total // page_size))
    lines.append(f"page {page}/{pages} ({result.total} total)")
    return "\n".join(lines)


class PullRequestCommand:
    """Runs one `yag pr` subcommand against the repository of the origin remote."""

    def __init__(
        self,
        config: AppConfig,
        repo_factory: Callable[[AppConfig], Repository] = resolve,
        out: Callable[[str], None] = print,
        ask: Callable[[str], str] = input,
        open_url: Callable[[str], bool] = webbrowser.open,
    ) -> None:
        self._config = config
        self._repo_factory = repo_factory
        self._out = out
        self._ask = ask
        self._open_url = open_url

    def run(self, args: argparse.Namespace) -> int:
        handlers = {
            "get": self.get,
            "list": self.list,
            "create": self.create,
            "close": self.close,
            "open": self.open,
        }
        handler = handlers.get(args.pr_command)
        if handler is None:
            raise YagError("missing pr subcommand (get, list, create, close, open)")
        handler(args)
        return 0

    def _repo(self) -> Repository:
        return self._repo_factory(self._config)

    def get(self, args: argparse.Namespace) -> PullRequest:
        pr = self._repo().get_pull_request(args.id)
        self._out(pr.detail())
        return pr

    def list(self, args: argparse.Namespace) -> PaginationResult:
        opt = ListOptions(author=args.author, me=args.me, page=args.page)
        result = self._repo().list_pull_requests(opt)
        self._out(render_page(result, opt.get_page(), self._config.pr.page_size))
        return result

    def _target_branch(self, args: argparse.Namespace) -> str:
        if args.base:
            return args.base
        return get_git_config(TARGET_CONFIG_KEY) or self._config.pr.default_target

    @staticmethod
    def _same_revision(source_branch: str, target_branch: str) -> bool:
        # base may exist only on the remote; then there is nothing to compare
        try:
            return get_rev(source_branch) == get_rev(target_branch)
        except GitRunnerError as e:
            LOG.debug("cannot compare revisions: %s", e)
            return False

    def create(self, args: argparse.Namespace) -> PullRequest | None:
        source_branch = args.head or get_current_branch()
        target_branch = self._target_branch(args)
        if source_branch == target_branch:
            raise YagError(f"head branch and base branch are same: {source_branch}")

        if self._same_revision(source_branch, target_branch):
            answer = self._ask("warning: head is same as base. still create pr? (Y/n) ")
            if answer.strip().lower() == "n":
                return None

        title = args.title
        if not title:
            try:
                title = get_latest_commit_message()
            except YagError as e:
                raise YagError("Cannot get latest commit message. Please specify title manually.") from e
        if not title:
            raise YagError("Cannot get latest commit message. Please specify title manually.")

        pr = self._repo().create_pull_request(source_branch, target_branch, title)
        self._out(pr.detail())
        return pr

    def close(self, args: argparse.Namespace) -> PullRequest:
        pr = self._repo().close_pull_request(args.id)
        self._out(pr.detail())
        return pr

    def open(self, args: argparse.Namespace) -> PullRequest:
        """Open the pull request in a browser; without id, the one for the current branch."""
        repo = self._repo()
        if args.id is not None:
            pr = repo.get_pull_request(args.id)
        else:
            branch = get_current_branch()
            result = repo.list_pull_requests(ListOptions(head=branch))
            if not result.items:
                raise YagError(f"no pull request for current branch: {branch}")
            pr = result.items[0]
        LOG.info("opening %s", pr.url)
        self._open_url(pr.url)
        return pr
