from __future__ import annotations

import subprocess

import pytest

from ghcontributors.errors import RemoteURLError
from ghcontributors.remote import RepoRef, current_repo_info, parse_git_url


@pytest.mark.parametrize("url", [
    "https://github.com/octo/repo.git",
    "https://github.com/octo/repo",
    "https://github.com/octo/repo/",
    "git@github.com:octo/repo.git",
    "ssh://git@github.com/octo/repo.git",
    "  git@github.com:octo/repo\n",
])
def test_parse_git_url(url) -> None:
    assert parse_git_url(url) == RepoRef(owner="octo", repo="repo")


def test_parse_git_url_keeps_dots_in_names() -> None:
    assert parse_git_url("git@github.com:octo/repo.js.git") == RepoRef("octo", "repo.js")


@pytest.mark.parametrize("url", [
    "https://gitlab.com/octo/repo.git",
    "git@github.com:octo",
    "https://github.com/octo/repo/tree/main",
    "",
])
def test_parse_git_url_rejects_non_github(url) -> None:
    with pytest.raises(RemoteURLError):
        parse_git_url(url)


def test_remote_url_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        parse_git_url("not a url")


def test_current_repo_info(monkeypatch) -> None:
    seen = {}

    def check_output(cmd, cwd=None, universal_newlines=None):
        seen.update(cmd=cmd, cwd=cwd)
        return "git@github.com:octo/repo.git\n"

    monkeypatch.setattr(subprocess, "check_output", check_output)
    assert current_repo_info("/work/repo") == RepoRef("octo", "repo")
    assert seen == {"cmd": ["git", "config", "--get", "remote.origin.url"], "cwd": "/work/repo"}


def test_current_repo_info_without_remote(monkeypatch) -> None:
    def check_output(cmd, cwd=None, universal_newlines=None):
        raise subprocess.CalledProcessError(1, cmd)

    monkeypatch.setattr(subprocess, "check_output", check_output)
    with pytest.raises(RemoteURLError, match="origin remote"):
        current_repo_info("/tmp")
