"""Configuration loading from YAML and environment.

Tokens never live here: they are stored in the profile file
(~/.yag/profile.yaml) managed by `yag profile add`. This module only
decides where that file is and how yag talks to the providers.
"""

from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from yag.errors import YagError

CONFIG_DIR = ".yag"
PROFILE_FILE = "profile.yaml"
CONFIG_FILE = "config.yaml"


class GitHubConfig(BaseSettings):
    """GitHub API and device-flow login settings."""

    model_config = SettingsConfigDict(env_prefix="GITHUB_", extra="ignore")

    api_url: str = Field(default="https://api.github.com", description="REST v3 base URL")
    login_url: str = Field(default="https://github.com/login", description="Device-flow base URL")
    client_id: str = Field(default="57dcd53cb489239f4c7b", description="OAuth app client id")
    scope: str = Field(default="repo", description="OAuth scope requested at login")


class GitLabConfig(BaseSettings):
    """Self-hosted GitLab settings."""

    model_config = SettingsConfigDict(env_prefix="GITLAB_", extra="ignore")

    scheme: str = Field(default="https", description="URL scheme used to reach the instance")


class PullRequestConfig(BaseSettings):
    """Defaults for pull request commands."""

    model_config = SettingsConfigDict(env_prefix="YAG_PR_", extra="ignore")

    page_size: int = Field(default=10, ge=1, le=100, description="Items per page for list")
    default_target: str = Field(default="master", description="Base branch when none is given")
    timeout: int = Field(default=30, ge=1, description="HTTP timeout in seconds")


class ProfileConfig(BaseSettings):
    """Where the credential profile lives."""

    model_config = SettingsConfigDict(env_prefix="YAG_PROFILE_", extra="ignore")

    path: Path | None = Field(default=None, description="Profile file; default ~/.yag/profile.yaml")


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="WARNING", description="Log level")
    format: str = Field(default="%(levelname)s - %(message)s", description="Log format")


class AppConfig(BaseSettings):
    """Root application config from YAML + env."""

    model_config = SettingsConfigDict(extra="ignore")

    github: GitHubConfig = Field(default_factory=GitHubConfig)
    gitlab: GitLabConfig = Field(default_factory=GitLabConfig)
    pr: PullRequestConfig = Field(default_factory=PullRequestConfig)
    profile: ProfileConfig = Field(default_factory=ProfileConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def profile_path(self) -> Path:
        """Resolved profile path (set by load_config)."""
        if self.profile.path is None:
            raise YagError("profile path is not configured")
        return self.profile.path


def home_dir(env: Mapping[str, str]) -> Path:
    """Home directory from HOME, falling back to the platform lookup."""
    home = env.get("HOME")
    return Path(home) if home else Path.home()


def _section(raw: dict[str, Any], name: str, path: Path) -> dict[str, Any]:
    section = raw.get(name) or {}
    if not isinstance(section, dict):
        raise YagError(f"invalid config file {path}: `{name}` must be a mapping")
    return section


def load_config(config_path: Path | None = None, env: Mapping[str, str] | None = None) -> AppConfig:
    """Load config from YAML file and environment.

    The home directory is looked up here and nowhere else: the resulting
    profile path is carried by the returned config.
    """
    if env is None:
        import os

        env = dict(os.environ)

    home = home_dir(env)
    path = config_path or home / CONFIG_DIR / CONFIG_FILE
    raw: dict[str, Any] = {}
    if path.is_file():
        try:
            raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise YagError(f"invalid config file {path}: {e}") from e
        if not isinstance(raw, dict):
            raise YagError(f"invalid config file {path}: expected a mapping")

    try:
        profile = ProfileConfig(**_section(raw, "profile", path))
        if profile.path is None:
            profile = ProfileConfig(path=home / CONFIG_DIR / PROFILE_FILE)
        else:
            profile = ProfileConfig(path=profile.path.expanduser())

        return AppConfig(
            github=GitHubConfig(**_section(raw, "github", path)),
            gitlab=GitLabConfig(**_section(raw, "gitlab", path)),
            pr=PullRequestConfig(**_section(raw, "pr", path)),
            profile=profile,
            logging=LoggingConfig(**_section(raw, "logging", path)),
        )
    except ValidationError as e:
        raise YagError(f"invalid configuration: {e}") from e
