"""GitLab REST v4 client for a self-hosted instance."""

import logging
from urllib.parse import quote

from yag.adapters.gitlab.schemas import Project
from yag.adapters.http import DEFAULT_TIMEOUT, HttpClient
from yag.adapters.response import decode_gitlab

API_PREFIX = "/api/v4"

LOG = logging.getLogger("yag.adapters.gitlab.client")


def encode_project_path(full_name: str) -> str:
    """URL-encode owner/repo (slashes included) for /projects/:id lookups."""
    return quote(full_name, safe="")


class GitLabClient(HttpClient):
    """Client for https://{host}/api/v4 authenticated with Private-Token."""

    def __init__(self, host: str, token: str, scheme: str = "https", timeout: int = DEFAULT_TIMEOUT) -> None:
        super().__init__(f"{scheme}://{host}{API_PREFIX}", timeout=timeout, headers={"Private-Token": token})
        self.host = host
        LOG.debug("GitLab client for %s", self.base_url)

    def get_project_id(self, full_name: str) -> int:
        """Numeric id of the project at path owner/repo."""
        resp = self.request("GET", f"/projects/{encode_project_path(full_name)}")
        project = decode_gitlab(resp.text, Project).unwrap()
        return project.id
