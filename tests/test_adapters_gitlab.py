"""Unit tests for the self-hosted GitLab repository and client (mocked API)."""

import json
from typing import Any
from unittest.mock import Mock, patch

import pytest

from yag.adapters.gitlab.client import GitLabClient, encode_project_path
from yag.adapters.gitlab.repository import GitLabRepository, parse_total
from yag.errors import MissingTotalError, ProviderApiError
from yag.models import ListOptions


def _response(payload: Any, status_code: int = 200, headers: dict | None = None) -> Mock:
    mock_resp = Mock()
    mock_resp.status_code = status_code
    mock_resp.text = json.dumps(payload)
    mock_resp.headers = headers or {}
    return mock_resp


MR = {
    "id": 9001,
    "iid": 7,
    "project_id": 12,
    "title": "Fix bug",
    "description": "",
    "state": "opened",
    "created_at": "2024-01-15T10:00:00.000Z",
    "updated_at": "2024-01-16T12:00:00.000Z",
    "target_branch": "main",
    "source_branch": "fix-bug",
    "author": {"id": 3, "name": "Jane", "username": "jane"},
    "web_url": "https://gitlab.example.com/group/project/-/merge_requests/7",
}

MR_PATH = "https://gitlab.example.com/api/v4/projects/12/merge_requests"


@pytest.fixture
def client() -> GitLabClient:
    return GitLabClient("gitlab.example.com", "glpat-test")


@pytest.fixture
def repo(client: GitLabClient) -> GitLabRepository:
    return GitLabRepository(client, project_id=12, page_size=10)


class TestClient:
    def test_private_token_header_and_base_url(self, client: GitLabClient) -> None:
        assert client.headers["Private-Token"] == "glpat-test"
        assert client.base_url == "https://gitlab.example.com/api/v4"

    def test_host_with_port(self) -> None:
        client = GitLabClient("gitlab.example.com:8443", "glpat-test")
        assert client.base_url == "https://gitlab.example.com:8443/api/v4"

    def test_encode_project_path(self) -> None:
        assert encode_project_path("group/sub/project") == "group%2Fsub%2Fproject"

    def test_get_project_id(self, client: GitLabClient) -> None:
        with patch.object(client._session, "request", return_value=_response({"id": 12})) as req:
            assert client.get_project_id("group/project") == 12
        assert req.call_args[0][0] == "GET"
        assert req.call_args[0][1] == "https://gitlab.example.com/api/v4/projects/group%2Fproject"

    def test_get_project_id_not_found(self, client: GitLabClient) -> None:
        body = {"message": "404 Project Not Found"}
        with patch.object(client._session, "request", return_value=_response(body, 404)):
            with pytest.raises(ProviderApiError, match="404 Project Not Found"):
                client.get_project_id("group/missing")


def test_init_resolves_project_id_once(client: GitLabClient) -> None:
    with patch.object(client._session, "request", return_value=_response({"id": 12})) as req:
        repo = GitLabRepository.init(client, "group/project")
    assert repo.project_id == 12
    assert req.call_count == 1


def test_get_pull_request(repo: GitLabRepository) -> None:
    with patch.object(repo._client._session, "request", return_value=_response(MR)) as req:
        pr = repo.get_pull_request(7)
    assert pr.id == 7
    assert pr.url == MR["web_url"]
    assert req.call_args[0][:2] == ("GET", f"{MR_PATH}/7")


def test_get_pull_request_error_message_list(repo: GitLabRepository) -> None:
    body = {"message": ["first problem", "second problem"]}
    with patch.object(repo._client._session, "request", return_value=_response(body, 400)):
        with pytest.raises(ProviderApiError) as exc_info:
            repo.get_pull_request(7)
    assert str(exc_info.value) == "first problem\nsecond problem"


def test_list_pull_requests(repo: GitLabRepository) -> None:
    resp = _response([MR], headers={"x-total": "23"})
    with patch.object(repo._client._session, "request", return_value=resp) as req:
        result = repo.list_pull_requests(ListOptions())

    assert result.total == 23
    assert [p.id for p in result.items] == [7]
    call_args = req.call_args
    assert call_args[0][:2] == ("GET", MR_PATH)
    assert call_args[1]["params"] == {"state": "opened", "per_page": 10, "page": 1}


def test_list_me_uses_scope_and_skips_user_lookup(repo: GitLabRepository) -> None:
    resp = _response([], headers={"x-total": "0"})
    with patch.object(repo._client._session, "request", return_value=resp) as req:
        repo.list_pull_requests(ListOptions(me=True, author="jane"))

    assert req.call_count == 1
    params = req.call_args[1]["params"]
    assert params["scope"] == "created-by-me"
    assert "author_id" not in params


def test_list_author_resolves_user_id_first(repo: GitLabRepository) -> None:
    users = _response([{"id": 3, "name": "Jane", "username": "jane"}])
    mrs = _response([MR], headers={"x-total": "1"})
    with patch.object(repo._client._session, "request", side_effect=[users, mrs]) as req:
        result = repo.list_pull_requests(ListOptions(author="jane", head="fix-bug", page=2))

    assert result.total == 1
    first, second = req.call_args_list
    assert first[0][1] == "https://gitlab.example.com/api/v4/users"
    assert first[1]["params"] == {"username": "jane"}
    params = second[1]["params"]
    assert params["author_id"] == 3
    assert params["source_branch"] == "fix-bug"
    assert params["page"] == 2


def test_list_unknown_author(repo: GitLabRepository) -> None:
    with patch.object(repo._client._session, "request", return_value=_response([])):
        with pytest.raises(ProviderApiError, match="no such user: ghost"):
            repo.list_pull_requests(ListOptions(author="ghost"))


def test_list_without_total_header(repo: GitLabRepository) -> None:
    with patch.object(repo._client._session, "request", return_value=_response([MR])):
        with pytest.raises(MissingTotalError):
            repo.list_pull_requests(ListOptions())


def test_list_error_body_wins_over_missing_total(repo: GitLabRepository) -> None:
    body = {"message": "401 Unauthorized"}
    with patch.object(repo._client._session, "request", return_value=_response(body, 401)):
        with pytest.raises(ProviderApiError, match="401 Unauthorized"):
            repo.list_pull_requests(ListOptions())


def test_parse_total() -> None:
    assert parse_total({"x-total": " 5 "}) == 5
    with pytest.raises(MissingTotalError):
        parse_total({"x-total": "many"})
    with pytest.raises(MissingTotalError):
        parse_total({})


def test_create_pull_request(repo: GitLabRepository) -> None:
    with patch.object(repo._client._session, "request", return_value=_response(MR, 201)) as req:
        pr = repo.create_pull_request("fix-bug", "main", "Fix bug")

    assert pr.id == 7
    call_args = req.call_args
    assert call_args[0][:2] == ("POST", MR_PATH)
    assert call_args[1]["json"] == {"source_branch": "fix-bug", "target_branch": "main", "title": "Fix bug"}


def test_create_pull_request_conflict(repo: GitLabRepository) -> None:
    body = {"message": ["Another open merge request already exists for this source branch: !6"]}
    with patch.object(repo._client._session, "request", return_value=_response(body, 409)):
        with pytest.raises(ProviderApiError, match="already exists"):
            repo.create_pull_request("fix-bug", "main", "Fix bug")


def test_close_pull_request(repo: GitLabRepository) -> None:
    closed = {**MR, "state": "closed"}
    with patch.object(repo._client._session, "request", return_value=_response(closed)) as req:
        pr = repo.close_pull_request(7)

    assert pr.id == 7
    call_args = req.call_args
    assert call_args[0][:2] == ("PUT", f"{MR_PATH}/7")
    assert call_args[1]["json"] == {"state_event": "close"}
