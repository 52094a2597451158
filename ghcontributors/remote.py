"""Find the GitHub owner and repository behind a git remote."""

import re
import subprocess
from dataclasses import dataclass

from .errors import RemoteURLError

GIT_URL_RE = re.compile(r'.*github\.com[:/]([^/]+)/(.+)$')


@dataclass(frozen=True)
class RepoRef:
    owner: str
    repo: str


def parse_git_url(url):
    """Parse https, ssh and scp-style GitHub remote URLs into a RepoRef"""
    match = GIT_URL_RE.match(url.strip())
    if not match:
        raise RemoteURLError(f"Not a GitHub remote: {url.strip()!r}")

    owner, repo = match.group(1), match.group(2).rstrip('/')
    if repo.endswith('.git'):
        repo = repo[:-4]
    if not repo or '/' in repo:
        raise RemoteURLError(f"Not a GitHub remote: {url.strip()!r}")
    return RepoRef(owner=owner, repo=repo)


def current_repo_info(path='.'):
    """Owner and repository of the origin remote of the git checkout at path"""
    try:
        url = subprocess.check_output(
            ['git', 'config', '--get', 'remote.origin.url'],
            cwd=path,
            universal_newlines=True
        )
    except (OSError, subprocess.CalledProcessError) as e:
        raise RemoteURLError(f"Could not read the origin remote in {path}: {e}") from e
    return parse_git_url(url)
