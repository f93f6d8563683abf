"""Tests for yag.profile (schemas, migration, store, token resolution)."""

import stat
import sys
from pathlib import Path

import pytest
import yaml

from yag.errors import ProfileCorruptError, ProfileWriteError
from yag.profile import (
    CredentialStore,
    GitHubCredentials,
    GitLabSelfHostedEntry,
    Profile,
    decode_profile,
    encode_profile,
    migrate,
    resolve_credential,
    resolve_token,
)


class TestMigrate:
    """Legacy single-object gitlab_self_hosted becomes a one-element list."""

    def test_legacy_single_entry_is_wrapped(self) -> None:
        raw = {"gitlab_self_hosted": {"host": "git.example.com", "token": "t1"}}
        assert migrate(raw) == {"gitlab_self_hosted": [{"host": "git.example.com", "token": "t1"}]}

    def test_current_shape_unchanged(self) -> None:
        raw = {"gitlab_self_hosted": [{"host": "a", "token": "b"}]}
        assert migrate(raw) == raw

    def test_legacy_profile_equals_direct_construction(self) -> None:
        legacy = decode_profile("gitlab_self_hosted:\n  host: git.example.com\n  token: t1\n")
        direct = Profile(gitlab_self_hosted=[GitLabSelfHostedEntry(host="git.example.com", token="t1")])
        assert legacy == direct


class TestDecodeEncode:
    def test_round_trip_keeps_all_gitlab_entries(self) -> None:
        profile = Profile()
        for i in range(3):
            profile.add_gitlab(f"git{i}.example.com", f"token-{i}")
        decoded = decode_profile(encode_profile(profile))
        assert [(e.host, e.token) for e in decoded.gitlab_self_hosted] == [
            ("git0.example.com", "token-0"),
            ("git1.example.com", "token-1"),
            ("git2.example.com", "token-2"),
        ]

    def test_empty_document_is_empty_profile(self) -> None:
        assert decode_profile("") == Profile()

    def test_invalid_yaml_is_corrupt(self) -> None:
        with pytest.raises(ProfileCorruptError):
            decode_profile("not: valid: yaml: [[[")

    def test_non_mapping_is_corrupt(self) -> None:
        with pytest.raises(ProfileCorruptError):
            decode_profile("- a\n- b\n")

    def test_unknown_shape_is_corrupt(self) -> None:
        with pytest.raises(ProfileCorruptError):
            decode_profile("gitlab_self_hosted: 42\n")

    def test_duplicate_hosts_are_corrupt(self) -> None:
        text = yaml.dump(
            {
                "gitlab_self_hosted": [
                    {"host": "git.example.com", "token": "a"},
                    {"host": "git.example.com", "token": "b"},
                ]
            }
        )
        with pytest.raises(ProfileCorruptError, match="duplicate"):
            decode_profile(text)

    def test_github_block_is_encoded_without_nulls(self) -> None:
        profile = Profile(github=GitHubCredentials(access_token="gho_x"))
        data = yaml.safe_load(encode_profile(profile))
        assert data["github"] == {"access_token": "gho_x"}


class TestProfile:
    def test_add_gitlab_replaces_same_host(self) -> None:
        profile = Profile()
        profile.add_gitlab("git.example.com", "old")
        profile.add_gitlab("git.example.com", "new")
        assert len(profile.gitlab_self_hosted) == 1
        assert profile.gitlab_self_hosted[0].token == "new"


class TestResolve:
    def _profile(self) -> Profile:
        return Profile(
            github=GitHubCredentials(access_token="gho_abc"),
            gitlab_self_hosted=[GitLabSelfHostedEntry(host="git.example.com", token="glpat-1")],
        )

    def test_exact_host_match(self) -> None:
        assert resolve_token(self._profile(), "git.example.com") == "glpat-1"

    def test_no_match_returns_none(self) -> None:
        assert resolve_token(self._profile(), "other.example.com") is None

    def test_no_substring_match(self) -> None:
        profile = self._profile()
        assert resolve_token(profile, "example.com") is None
        assert resolve_token(profile, "git.example.com.evil") is None
        assert resolve_token(profile, "GIT.example.com") is None

    def test_github_oauth_token(self) -> None:
        credential = resolve_credential(self._profile(), "github.com")
        assert credential is not None
        assert credential.token == "gho_abc"
        assert not credential.is_basic_auth

    def test_github_basic_auth(self) -> None:
        profile = Profile(github=GitHubCredentials(username="octocat", token="ghp_x"))
        credential = resolve_credential(profile, "github.com")
        assert credential is not None
        assert credential.is_basic_auth
        assert credential.username == "octocat"
        assert resolve_token(profile, "github.com") == "ghp_x"

    def test_github_oauth_wins_over_basic_auth(self) -> None:
        profile = Profile(github=GitHubCredentials(access_token="gho_a", username="u", token="t"))
        assert resolve_credential(profile, "github.com").username is None

    def test_github_incomplete_basic_auth_is_none(self) -> None:
        profile = Profile(github=GitHubCredentials(username="octocat"))
        assert resolve_credential(profile, "github.com") is None

    def test_github_missing_block_is_none(self) -> None:
        assert resolve_token(Profile(), "github.com") is None


class TestCredentialStore:
    def test_load_missing_creates_empty_profile(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / ".yag" / "profile.yaml"
        profile = CredentialStore(path).load()
        assert profile == Profile()
        assert path.is_file()

    def test_save_then_load(self, tmp_path: Path) -> None:
        store = CredentialStore(tmp_path / "profile.yaml")
        profile = Profile()
        profile.add_gitlab("git.example.com", "t")
        store.save(profile)
        assert store.load() == profile

    def test_load_legacy_file(self, tmp_path: Path) -> None:
        path = tmp_path / "profile.yaml"
        path.write_text("gitlab_self_hosted:\n  host: h\n  token: t\n", encoding="utf-8")
        profile = CredentialStore(path).load()
        assert resolve_token(profile, "h") == "t"

    def test_load_corrupt_file_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "profile.yaml"
        path.write_text("github: [1, 2]\n", encoding="utf-8")
        with pytest.raises(ProfileCorruptError):
            CredentialStore(path).load()

    def test_load_when_path_is_directory_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "profile.yaml"
        path.mkdir()
        with pytest.raises(ProfileWriteError, match="cannot write profile"):
            CredentialStore(path).load()

    def test_save_under_file_parent_raises(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        with pytest.raises(ProfileWriteError):
            CredentialStore(blocker / "profile.yaml").save(Profile())

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
    def test_saved_file_is_owner_only(self, tmp_path: Path) -> None:
        path = tmp_path / "profile.yaml"
        CredentialStore(path).save(Profile())
        assert stat.S_IMODE(path.stat().st_mode) == 0o600
