"""`yag profile add`: store credentials interactively."""

import argparse
from typing import Callable

from yag.config import AppConfig
from yag.errors import YagError
from yag.profile import CredentialStore
from yag.profile.prompter import Prompter, default_prompters, prompt_add_profile


class ProfileCommand:
    """Runs one `yag profile` subcommand."""

    def __init__(
        self,
        config: AppConfig,
        ask: Callable[[str], str] = input,
        out: Callable[[str], None] = print,
        prompters: list[Prompter] | None = None,
    ) -> None:
        self._store = CredentialStore(config.profile_path)
        self._ask = ask
        self._out = out
        self._prompters = prompters if prompters is not None else default_prompters(config, ask=ask, notify=out)

    def run(self, args: argparse.Namespace) -> int:
        if args.profile_command != "add":
            raise YagError("missing profile subcommand (add)")
        prompt_add_profile(self._store, self._prompters, ask=self._ask, notify=self._out)
        self._out(f"Saved profile to {self._store.path}")
        return 0
