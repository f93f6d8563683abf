"""GitLab REST v4 payloads (only the fields yag reads)."""

from pydantic import BaseModel


class Project(BaseModel):
    id: int


class User(BaseModel):
    id: int
    name: str = ""
    username: str


class MergeRequest(BaseModel):
    id: int
    iid: int
    project_id: int
    title: str
    description: str | None = None
    state: str
    created_at: str
    updated_at: str
    target_branch: str
    source_branch: str
    author: User
    web_url: str
