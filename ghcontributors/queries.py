"""
GraphQL queries against the GitHub v4 API.

Every node that owns a paginated connection selects its ``id`` so that a
follow-up ``node(id:)`` query can continue that connection from its cursor.
Each builder returns a ``(query, variables)`` pair.
"""

from .timefilter import TimeWindow

# GitHub caps a connection page at 100 nodes
PAGE_SIZE = 100
# Organization queries nest one level deeper, keep them under the node limit
ORG_PAGE_SIZE = 25

PAGE_INFO = "pageInfo { endCursor hasNextPage }"
ACTOR = "login url ... on User { name }"
USER = "login url name"

WHO_AM_I = "query { viewer { login } }"

# Connection field -> node type of its elements
CHILD_TYPES = {
    'repositories': 'Repository',
    'pullRequests': 'PullRequest',
    'issues': 'Issue',
    'comments': 'Comment',
    'reactions': 'Reaction',
    'history': 'Commit',
}


def _connection(field, page_size, selection, extra_args=None, paged=False):
    args = [f"first: {page_size}"]
    if paged:
        args.append("after: $cursor")
    if extra_args:
        args.append(extra_args)
    return f"{field}({', '.join(args)}) {{ {PAGE_INFO} nodes {{ {selection} }} }}"


def _comments(page_size, paged=False):
    return _connection('comments', page_size, f"createdAt author {{ {ACTOR} }}", paged=paged)


def _reactions(page_size, paged=False):
    return _connection('reactions', page_size, f"createdAt user {{ {USER} }}", paged=paged)


def _thread(page_size, reactions):
    """Selection for a pull request or issue node"""
    parts = ["id", "createdAt", f"author {{ {ACTOR} }}", _comments(page_size)]
    if reactions:
        parts.append(_reactions(page_size))
    return " ".join(parts)


def _history(page_size, paged=False):
    history = _connection(
        'history', page_size,
        f"committedDate author {{ user {{ {USER} }} }}",
        extra_args="since: $since, until: $until", paged=paged)
    return f"defaultBranchRef {{ target {{ ... on Commit {{ {history} }} }} }}"


def _threads(field, page_size, nested_size, reactions, paged=False):
    return _connection(
        field, page_size, _thread(nested_size, reactions),
        extra_args="orderBy: {field: CREATED_AT, direction: DESC}", paged=paged)


def _repository(page_size, commits, reactions):
    """Selection for a repository node"""
    parts = [
        "id", "name", "nameWithOwner",
        _threads('pullRequests', page_size, page_size, reactions),
        _threads('issues', page_size, page_size, reactions),
    ]
    if commits:
        parts.append(_history(page_size))
    return " ".join(parts)


def _declarations(declared, commits):
    if commits:
        declared = declared + ["$since: GitTimestamp", "$until: GitTimestamp"]
    return f"({', '.join(declared)})" if declared else ""


def _variables(window, commits, **values):
    if commits:
        after, before = (window or TimeWindow()).bounds()
        values['since'] = after.isoformat()
        values['until'] = before.isoformat()
    return values


def repository(owner, name, window=None, commits=False, reactions=False):
    """Pull requests, issues and their discussion for one repository"""
    header = _declarations(["$owner: String!", "$name: String!"], commits)
    query = (
        f"query{header} {{ repository(owner: $owner, name: $name) {{ "
        f"{_repository(PAGE_SIZE, commits, reactions)} }} }}"
    )
    return query, _variables(window, commits, owner=owner, name=name)


def organization(login, window=None, commits=False, reactions=False):
    """Every repository of an organization, with smaller nested pages"""
    header = _declarations(["$login: String!"], commits)
    repos = _connection('repositories', PAGE_SIZE, _repository(ORG_PAGE_SIZE, commits, reactions))
    query = f"query{header} {{ organization(login: $login) {{ id login {repos} }} }}"
    return query, _variables(window, commits, login=login)


def next_page(owner_type, field, node_id, cursor, window=None, commits=False, reactions=False):
    """
    The page after ``cursor`` of connection ``field`` on node ``node_id``.

    ``owner_type`` is the GraphQL type owning the connection (Organization,
    Repository, PullRequest or Issue).
    """
    if field == 'repositories':
        selection = _connection(field, PAGE_SIZE, _repository(ORG_PAGE_SIZE, commits, reactions), paged=True)
    elif field in ('pullRequests', 'issues'):
        selection = _threads(field, PAGE_SIZE, PAGE_SIZE, reactions, paged=True)
    elif field == 'history':
        selection = _history(PAGE_SIZE, paged=True)
    elif field == 'comments':
        selection = _comments(PAGE_SIZE, paged=True)
    elif field == 'reactions':
        selection = _reactions(PAGE_SIZE, paged=True)
    else:
        raise ValueError(f"Unknown connection field: {field}")

    # Only the history page and nested repository pages reference the window
    uses_window = commits and field in ('history', 'repositories')
    header = _declarations(["$id: ID!", "$cursor: String"], uses_window)
    query = f"query{header} {{ node(id: $id) {{ ... on {owner_type} {{ {selection} }} }} }}"
    return query, _variables(window, uses_window, id=node_id, cursor=cursor)


def clean_who_am_i(json):
    """Login of the viewer from a WHO_AM_I response"""
    return json['viewer']['login']
