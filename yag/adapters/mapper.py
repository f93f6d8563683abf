"""Domain mapper: provider-native records to canonical PullRequest."""

from yag.adapters.github import schemas as github
from yag.adapters.gitlab import schemas as gitlab
from yag.models import PaginationResult, PullRequest


def pull_from_github(pull: github.Pull) -> PullRequest:
    return PullRequest(
        id=pull.number,
        title=pull.title,
        author=pull.user.login,
        base=pull.base.ref if pull.base else None,
        head=pull.head.ref if pull.head else None,
        updated_at=pull.updated_at,
        url=pull.html_url,
    )


def page_from_github(result: github.SearchResult) -> PaginationResult:
    """Search result page; total is GitHub's total_count, not the page length."""
    return PaginationResult(
        total=result.total_count,
        items=[pull_from_github(p) for p in result.items],
    )


def pull_from_gitlab(mr: gitlab.MergeRequest) -> PullRequest:
    return PullRequest(
        id=mr.iid,
        title=mr.title,
        author=mr.author.username,
        base=mr.target_branch,
        head=mr.source_branch,
        updated_at=mr.updated_at,
        url=mr.web_url,
    )


def page_from_gitlab(mrs: list[gitlab.MergeRequest], total: int) -> PaginationResult:
    """Merge request page; total comes from the x-total header."""
    return PaginationResult(total=total, items=[pull_from_gitlab(mr) for mr in mrs])
