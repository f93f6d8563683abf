"""GitHub implementation of Repository."""

import logging
from typing import Any, Dict, List, Tuple

from yag.adapters import mapper
from yag.adapters.base import Repository
from yag.adapters.github.client import GitHubClient
from yag.adapters.github.schemas import Pull, SearchResult
from yag.adapters.response import decode_github
from yag.models import ListOptions, PaginationResult, PullRequest

DEFAULT_PAGE_SIZE = 10

LOG = logging.getLogger("yag.adapters.github.repository")


def build_query(pairs: List[Tuple[str, str]]) -> str:
    """Search qualifiers as `key:value` joined by spaces."""
    return " ".join(f"{k}:{v}" for k, v in pairs)


class GitHubRepository(Repository):
    """Pull requests of one GitHub repository (owner/repo)."""

    def __init__(self, full_name: str, client: GitHubClient, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        self.repo = full_name
        self._client = client
        self._page_size = page_size

    def _pull(self, method: str, path: str, json: Dict[str, Any] | None = None) -> PullRequest:
        resp = self._client.request(method, path, json=json)
        pull = decode_github(resp.text, Pull).unwrap()
        return mapper.pull_from_github(pull)

    def get_pull_request(self, id: int) -> PullRequest:
        return self._pull("GET", f"/repos/{self.repo}/pulls/{id}")

    def list_pull_requests(self, opt: ListOptions) -> PaginationResult:
        LOG.debug("list options: %s", opt)
        pairs: List[Tuple[str, str]] = [("is", "pr"), ("is", "open"), ("repo", self.repo)]
        if opt.me:
            pairs.append(("author", "@me"))
        elif opt.author:
            pairs.append(("author", opt.author))
        if opt.head:
            pairs.append(("head", opt.head))

        params = {
            "q": build_query(pairs),
            "per_page": self._page_size,
            "page": opt.get_page(),
        }
        resp = self._client.request("GET", "/search/issues", params=params)
        result = decode_github(resp.text, SearchResult).unwrap()
        return mapper.page_from_github(result)

    def create_pull_request(self, source_branch: str, target_branch: str, title: str) -> PullRequest:
        return self._pull(
            "POST",
            f"/repos/{self.repo}/pulls",
            json={"title": title, "head": source_branch, "base": target_branch},
        )

    def close_pull_request(self, id: int) -> PullRequest:
        return self._pull("PATCH", f"/repos/{self.repo}/pulls/{id}", json={"state": "closed"})
