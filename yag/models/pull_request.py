"""Pull request (or merge request) model and a page of them."""

from pydantic import BaseModel, Field


class PullRequest(BaseModel):
    """Pull request (or merge request), provider independent.

    `id` is the provider-native number users type (GitHub number, GitLab
    iid), not the global database id. `updated_at` is kept exactly as the
    provider sent it.
    """

    model_config = {"frozen": True}

    id: int
    title: str
    author: str
    base: str | None = None
    head: str | None = None
    updated_at: str
    url: str

    def summary(self) -> str:
        """One-line rendering: id, title, author and branches."""
        line = f"{self.id:>6} {self.title} <{self.author}>"
        if self.head or self.base:
            line += f" {self.head or '?'} -> {self.base or '?'}"
        return line

    def detail(self) -> str:
        """Multi-line rendering used by get, create and close."""
        lines = [self.summary(), f"       updated: {self.updated_at}", f"       {self.url}"]
        return "\n".join(lines)


class PaginationResult(BaseModel):
    """One page of pull requests plus the provider-reported total."""

    model_config = {"frozen": True}

    total: int = Field(..., ge=0, description="Total matching items reported by the provider")
    items: list[PullRequest] = Field(default_factory=list)
