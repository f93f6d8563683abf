"""Interactive profile creation (`yag profile add`)."""

import logging
from typing import Callable

from yag.adapters.github.device_flow import GitHubDeviceFlow
from yag.config import AppConfig
from yag.errors import YagError
from yag.profile.schemas import GitHubCredentials, Profile
from yag.profile.store import CredentialStore

LOG = logging.getLogger("yag.profile.prompter")


class Prompter:
    """Asks the user for one provider's credentials and fills them into a profile."""

    display_name = ""

    def __init__(self, ask: Callable[[str], str] = input, notify: Callable[[str], None] = print) -> None:
        self._ask = ask
        self._notify = notify

    def prompt(self, profile: Profile) -> None:
        raise NotImplementedError


class GitHubPrompter(Prompter):
    """Logs in through the GitHub device flow and stores the OAuth token."""

    display_name = "GitHub"

    def __init__(
        self,
        flow: GitHubDeviceFlow,
        ask: Callable[[str], str] = input,
        notify: Callable[[str], None] = print,
    ) -> None:
        super().__init__(ask, notify)
        self._flow = flow

    def prompt(self, profile: Profile) -> None:
        self._notify("Logging in GitHub...")
        token = self._flow.login(notify=self._notify, confirm=self._ask)
        profile.set_github(GitHubCredentials(access_token=token))


class GitLabSelfHostedPrompter(Prompter):
    """Asks for host and personal access token of a GitLab instance."""

    display_name = "GitLab (self-hosted)"

    def prompt(self, profile: Profile) -> None:
        host = self._ask("host: ").strip()
        token = self._ask("token: ").strip()
        if not host or not token:
            raise YagError("host and token are required")
        profile.add_gitlab(host, token)


def default_prompters(
    config: AppConfig,
    ask: Callable[[str], str] = input,
    notify: Callable[[str], None] = print,
) -> list[Prompter]:
    flow = GitHubDeviceFlow(
        client_id=config.github.client_id,
        scope=config.github.scope,
        login_url=config.github.login_url,
        timeout=config.pr.timeout,
    )
    return [
        GitHubPrompter(flow, ask=ask, notify=notify),
        GitLabSelfHostedPrompter(ask=ask, notify=notify),
    ]


def prompt_add_profile(
    store: CredentialStore,
    prompters: list[Prompter],
    ask: Callable[[str], str] = input,
    notify: Callable[[str], None] = print,
) -> Profile:
    """Let the user pick a provider, run its prompter and save the profile."""
    profile = store.load()
    for i, prompter in enumerate(prompters, start=1):
        notify(f"{i}) {prompter.display_name}")
    choice = ask("Select a provider: ").strip()
    if not choice.isdigit() or not 1 <= int(choice) <= len(prompters):
        raise YagError(f"invalid choice: {choice!r}")
    prompter = prompters[int(choice) - 1]

    prompter.prompt(profile)
    path = store.save(profile)
    LOG.info("Saved %s profile to %s", prompter.display_name, path)
    return profile
