"""Filters for listing open pull requests."""

from pydantic import BaseModel


class ListOptions(BaseModel):
    """Filters for Repository.list_pull_requests.

    `me` and `author` are exclusive; when both are set `me` wins. `page` is
    1-based; None means the first page.
    """

    author: str | None = None
    me: bool = False
    page: int | None = None
    head: str | None = None

    def get_page(self) -> int:
        """Requested page, defaulting to 1."""
        return self.page if self.page and self.page > 0 else 1
