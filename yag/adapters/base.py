"""Abstract base for pull request repositories (GitHub, self-hosted GitLab)."""

from abc import ABC, abstractmethod

from yag.models import ListOptions, PaginationResult, PullRequest


class Repository(ABC):
    """Pull request operations on the repository behind the origin remote.

    Every method returns canonical models and raises YagError subclasses:
    NetworkError, ProviderApiError (message normalized), DecodeError.
    """

    @abstractmethod
    def get_pull_request(self, id: int) -> PullRequest:
        """Fetch pull request by its number (GitHub number, GitLab iid)."""
        ...

    @abstractmethod
    def list_pull_requests(self, opt: ListOptions) -> PaginationResult:
        """List open pull requests matching opt, one page at a time."""
        ...

    @abstractmethod
    def create_pull_request(self, source_branch: str, target_branch: str, title: str) -> PullRequest:
        """Open a pull request from source_branch into target_branch."""
        ...

    @abstractmethod
    def close_pull_request(self, id: int) -> PullRequest:
        """Close pull request without merging."""
        ...
