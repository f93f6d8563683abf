"""Profile as stored in ~/.yag/profile.yaml."""

from pydantic import BaseModel, Field, model_validator


class GitLabSelfHostedEntry(BaseModel):
    """Token for one self-hosted GitLab instance."""

    host: str = Field(..., description="Hostname as it appears in remote URLs")
    token: str = Field(..., description="Personal access token (Private-Token)")

    model_config = {"extra": "forbid"}


class GitHubCredentials(BaseModel):
    """GitHub credentials: an OAuth access token or username + token (basic auth)."""

    access_token: str | None = Field(default=None, description="OAuth token from device login")
    username: str | None = Field(default=None, description="Login for basic auth")
    token: str | None = Field(default=None, description="Personal access token for basic auth")

    model_config = {"extra": "forbid"}


class Credential(BaseModel):
    """Credential resolved for one host.

    `username` is set only for GitHub basic auth; otherwise `token` is a
    bearer-style token (GitHub OAuth or GitLab private token).
    """

    token: str
    username: str | None = None

    model_config = {"frozen": True}

    @property
    def is_basic_auth(self) -> bool:
        return self.username is not None


class Profile(BaseModel):
    """Per-host credentials. At most one GitLab entry per host."""

    github: GitHubCredentials | None = None
    gitlab_self_hosted: list[GitLabSelfHostedEntry] = Field(default_factory=list)

    model_config = {"extra": "forbid"}

    @model_validator(mode="after")
    def _unique_hosts(self) -> "Profile":
        seen: set[str] = set()
        for entry in self.gitlab_self_hosted:
            if entry.host in seen:
                raise ValueError(f"duplicate gitlab_self_hosted host: {entry.host}")
            seen.add(entry.host)
        return self

    def add_gitlab(self, host: str, token: str) -> None:
        """Store the token for host, replacing any existing entry for it."""
        entries = [e for e in self.gitlab_self_hosted if e.host != host]
        entries.append(GitLabSelfHostedEntry(host=host, token=token))
        self.gitlab_self_hosted = entries

    def set_github(self, credentials: GitHubCredentials) -> None:
        self.github = credentials
