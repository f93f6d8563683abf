"""Provider adapters: repository contract, GitHub and self-hosted GitLab."""

from yag.adapters.base import Repository
from yag.adapters.response import Outcome

__all__ = ["Outcome", "Repository"]
