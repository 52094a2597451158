"""
Full mode: follow every paginated connection until it is exhausted.

A single GraphQL request can only return one bounded page per connection.
The functions here take the first response and keep issuing ``node(id:)``
queries for each connection that reports ``hasNextPage``, recursing into
newly fetched nodes, until the tree is what an unbounded query would have
returned. Requests are issued one at a time because each depends on the
cursor of the previous page.
"""

import copy
import sys

from . import queries
from .errors import QueryError
from .models import commit_history

# Node type -> connection fields it may own
CONNECTIONS = {
    'Organization': ('repositories',),
    'Repository': ('pullRequests', 'issues', 'history'),
    'PullRequest': ('comments', 'reactions'),
    'Issue': ('comments', 'reactions'),
}


class TreeResolver:
    def __init__(self, fetch, window=None, commits=False, reactions=False, verbose=False):
        # fetch(query, variables) -> response data
        self.fetch = fetch
        self.window = window
        self.commits = commits
        self.reactions = reactions
        self.verbose = verbose
        self.requests = 0

    def resolve(self, node, node_type):
        """Complete every connection below ``node`` in place"""
        for field in CONNECTIONS.get(node_type, ()):
            connection = commit_history(node) if field == 'history' else node.get(field)
            if connection is None:
                continue
            self.resolve_connection(connection, node_type, field, node.get('id'))
        return node

    def resolve_connection(self, connection, owner_type, field, node_id):
        page_info = connection.get('pageInfo') or {}
        nodes = connection.setdefault('nodes', [])

        while page_info.get('hasNextPage'):
            page = self._next_page(owner_type, field, node_id, page_info.get('endCursor'))
            nodes.extend(page.get('nodes') or [])
            page_info = page.get('pageInfo') or {}
        connection['pageInfo'] = page_info

        child_type = queries.CHILD_TYPES[field]
        for child in nodes:
            if child is not None:
                self.resolve(child, child_type)

    def _next_page(self, owner_type, field, node_id, cursor):
        query, variables = queries.next_page(
            owner_type, field, node_id, cursor,
            window=self.window, commits=self.commits, reactions=self.reactions)
        self.requests += 1
        if self.verbose:
            print(f"Fetching next page of {field} for {owner_type} {node_id}...", file=sys.stderr)

        data = self.fetch(query, variables)
        node = (data or {}).get('node')
        if node is None:
            raise QueryError('node', node_id)
        page = commit_history(node) if field == 'history' else node.get(field)
        if page is None:
            raise QueryError(field, node_id)
        return page


def resolve_repository(json, fetch, window=None, commits=False, reactions=False, verbose=False):
    """Copy of a ``{"repository": ...}`` response with every page fetched"""
    tree = copy.deepcopy(json)
    resolver = TreeResolver(fetch, window, commits, reactions, verbose)
    resolver.resolve(tree['repository'], 'Repository')
    if verbose:
        print(f"Resolved full tree with {resolver.requests} follow-up requests.", file=sys.stderr)
    return tree


def resolve_organization(json, fetch, window=None, commits=False, reactions=False, verbose=False):
    """Copy of an ``{"organization": ...}`` response with every page fetched"""
    tree = copy.deepcopy(json)
    resolver = TreeResolver(fetch, window, commits, reactions, verbose)
    resolver.resolve(tree['organization'], 'Organization')
    if verbose:
        print(f"Resolved full tree with {resolver.requests} follow-up requests.", file=sys.stderr)
    return tree
