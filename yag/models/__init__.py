"""Canonical data models shared by every provider (Pydantic)."""

from yag.models.list_options import ListOptions
from yag.models.pull_request import PaginationResult, PullRequest
from yag.models.remote import RemoteDescriptor

__all__ = ["ListOptions", "PaginationResult", "PullRequest", "RemoteDescriptor"]
