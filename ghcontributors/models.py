"""
Typed views of contributors and of the GraphQL response tree.

The raw API payload is a nested dict whose shape depends on which optional
fields were queried. ``parse_repository`` and ``parse_organization`` turn it
into a fixed set of dataclasses so the summarizing code never has to guess
whether a key is present.
"""

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import List, Optional

from .timefilter import parse_timestamp


@dataclass(frozen=True)
class Contributor:
    login: str
    name: Optional[str] = None
    url: str = ""
    count: int = 1


@dataclass(frozen=True)
class Event:
    created_at: datetime
    author: Optional[Contributor] = None


@dataclass
class Thread:
    """A pull request or issue together with its discussion"""
    created_at: datetime
    author: Optional[Contributor]
    comments: List[Event] = field(default_factory=list)
    reactions: List[Event] = field(default_factory=list)

    @property
    def creation(self):
        return Event(self.created_at, self.author)


@dataclass
class RepositoryTree:
    name: str
    pull_requests: List[Thread] = field(default_factory=list)
    issues: List[Thread] = field(default_factory=list)
    commits: List[Event] = field(default_factory=list)


@dataclass
class OrganizationTree:
    login: str
    repositories: List[RepositoryTree] = field(default_factory=list)


@dataclass
class Synopsis:
    pr_creators: List[Contributor] = field(default_factory=list)
    pr_commentators: List[Contributor] = field(default_factory=list)
    issue_creators: List[Contributor] = field(default_factory=list)
    issue_commentators: List[Contributor] = field(default_factory=list)
    # None means the category was not requested, [] means nobody matched
    commit_authors: Optional[List[Contributor]] = None
    reactors: Optional[List[Contributor]] = None

    def categories(self):
        """(category, contributors) pairs for every requested category"""
        return [(f.name, getattr(self, f.name)) for f in fields(self)
                if getattr(self, f.name) is not None]


def parse_actor(raw):
    """Contributor for a GraphQL Actor/User object, None for deleted accounts"""
    if raw is None or raw.get('login') is None:
        return None
    # Only User carries a name; bots and mannequins do not
    return Contributor(login=raw['login'], name=raw.get('name'), url=raw.get('url') or "")


def connection_nodes(raw, key):
    """Nodes of a connection field, empty when the field was not selected"""
    connection = raw.get(key)
    if connection is None:
        return []
    return [node for node in connection.get('nodes') or [] if node is not None]


def parse_event(raw, date_key='createdAt', actor_key='author'):
    return Event(created_at=parse_timestamp(raw[date_key]), author=parse_actor(raw.get(actor_key)))


def parse_thread(raw):
    return Thread(
        created_at=parse_timestamp(raw['createdAt']),
        author=parse_actor(raw.get('author')),
        comments=[parse_event(c) for c in connection_nodes(raw, 'comments')],
        reactions=[parse_event(r, actor_key='user') for r in connection_nodes(raw, 'reactions')],
    )


def commit_history(raw):
    """The default branch history connection, or None for empty repositories"""
    branch = raw.get('defaultBranchRef')
    if branch is None:
        return None
    target = branch.get('target') or {}
    return target.get('history')


def parse_commit(raw):
    # A commit's git author maps to a GitHub user only when the email is linked
    author = raw.get('author') or {}
    return Event(created_at=parse_timestamp(raw['committedDate']), author=parse_actor(author.get('user')))


def parse_repository(raw):
    history = commit_history(raw) or {}
    return RepositoryTree(
        name=raw.get('nameWithOwner') or raw.get('name') or "",
        pull_requests=[parse_thread(pr) for pr in connection_nodes(raw, 'pullRequests')],
        issues=[parse_thread(issue) for issue in connection_nodes(raw, 'issues')],
        commits=[parse_commit(c) for c in history.get('nodes') or [] if c is not None],
    )


def parse_organization(raw):
    return OrganizationTree(
        login=raw.get('login') or "",
        repositories=[parse_repository(repo) for repo in connection_nodes(raw, 'repositories')],
    )
