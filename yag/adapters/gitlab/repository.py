"""Self-hosted GitLab implementation of Repository (merge requests)."""

import logging
from typing import Any, Dict

from yag.adapters import mapper
from yag.adapters.base import Repository
from yag.adapters.gitlab.client import GitLabClient
from yag.adapters.gitlab.schemas import MergeRequest, User
from yag.adapters.response import decode_gitlab
from yag.errors import MissingTotalError, ProviderApiError
from yag.models import ListOptions, PaginationResult, PullRequest

DEFAULT_PAGE_SIZE = 10
TOTAL_HEADER = "x-total"

LOG = logging.getLogger("yag.adapters.gitlab.repository")


def parse_total(headers: Any) -> int:
    """Total item count from the x-total header."""
    value = headers.get(TOTAL_HEADER)
    if value is None:
        raise MissingTotalError(f"fail to get total: no {TOTAL_HEADER} header")
    try:
        return int(str(value).strip())
    except ValueError as e:
        raise MissingTotalError(f"fail to get total: {TOTAL_HEADER}={value!r}") from e


class GitLabRepository(Repository):
    """Merge requests of one GitLab project.

    The numeric project id is looked up once, when the repository is built.
    """

    def __init__(self, client: GitLabClient, project_id: int, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        self._client = client
        self.project_id = project_id
        self._page_size = page_size

    @classmethod
    def init(cls, client: GitLabClient, full_name: str, page_size: int = DEFAULT_PAGE_SIZE) -> "GitLabRepository":
        """Resolve the project id of full_name and build the repository."""
        project_id = client.get_project_id(full_name)
        LOG.debug("project %s has id %s", full_name, project_id)
        return cls(client, project_id, page_size=page_size)

    @property
    def _mr_path(self) -> str:
        return f"/projects/{self.project_id}/merge_requests"

    def _merge_request(self, method: str, path: str, json: Dict[str, Any] | None = None) -> PullRequest:
        resp = self._client.request(method, path, json=json)
        mr = decode_gitlab(resp.text, MergeRequest).unwrap()
        return mapper.pull_from_gitlab(mr)

    def get_user_by_username(self, username: str) -> User:
        resp = self._client.request("GET", "/users", params={"username": username})
        users = decode_gitlab(resp.text, list[User]).unwrap()
        if not users:
            raise ProviderApiError(f"no such user: {username}")
        return users[0]

    def get_pull_request(self, id: int) -> PullRequest:
        return self._merge_request("GET", f"{self._mr_path}/{id}")

    def list_pull_requests(self, opt: ListOptions) -> PaginationResult:
        LOG.debug("list options: %s", opt)
        params: Dict[str, Any] = {
            "state": "opened",
            "per_page": self._page_size,
            "page": opt.get_page(),
        }
        if opt.me:
            params["scope"] = "created-by-me"
        elif opt.author:
            params["author_id"] = self.get_user_by_username(opt.author).id
        if opt.head:
            params["source_branch"] = opt.head

        resp = self._client.request("GET", self._mr_path, params=params)
        mrs = decode_gitlab(resp.text, list[MergeRequest]).unwrap()
        total = parse_total(resp.headers)
        return mapper.page_from_gitlab(mrs, total)

    def create_pull_request(self, source_branch: str, target_branch: str, title: str) -> PullRequest:
        return self._merge_request(
            "POST",
            self._mr_path,
            json={"source_branch": source_branch, "target_branch": target_branch, "title": title},
        )

    def close_pull_request(self, id: int) -> PullRequest:
        return self._merge_request("PUT", f"{self._mr_path}/{id}", json={"state_event": "close"})
