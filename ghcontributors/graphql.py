"""Execute GraphQL queries against the GitHub API."""

import sys

import requests

from .errors import TransportError

GITHUB_GRAPHQL_URL = 'https://api.github.com/graphql'
TIMEOUT = 60


def execute(query, token, variables=None, name=None, verbose=False, debug=False):
    """Make a GraphQL request to the GitHub API and return its data"""
    headers = {
        'Authorization': f'Bearer {token}',
        'Content-Type': 'application/json',
    }

    if verbose:
        print(f"Querying GitHub for {name or 'viewer'}...", file=sys.stderr)
    if debug:
        print(f"Query: {query}", file=sys.stderr)
        print(f"Variables: {variables}", file=sys.stderr)

    response = requests.post(
        GITHUB_GRAPHQL_URL,
        headers=headers,
        json={'query': query, 'variables': variables or {}},
        timeout=TIMEOUT,
    )

    if response.status_code != 200:
        raise TransportError(
            f"Query failed with status code {response.status_code}: {response.text}",
            status_code=response.status_code,
        )

    result = response.json()
    if debug:
        print(f"Response for {name}: {len(response.content)} bytes", file=sys.stderr)

    data = result.get('data')
    errors = result.get('errors')
    if errors and data is None:
        raise TransportError(f"GraphQL query errors: {errors}")
    if errors and verbose:
        # GitHub reports a missing repository as a null field plus an error
        print(f"GraphQL warnings for {name}: {errors}", file=sys.stderr)

    return data
