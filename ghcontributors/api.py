"""
Contributor synopses for repositories, organizations and config files.

``repo_contributors`` and ``org_contributors`` run one query (shallow mode)
or one query plus every follow-up page (``full=True``) and summarize the
result. ``from_config`` fans out over every entry of a config file.
"""

import sys
from concurrent.futures import ThreadPoolExecutor

from . import graphql, queries
from .config import load_config, resolve_token, validate_config
from .errors import ConfigurationError, QueryError
from .resolver import resolve_organization, resolve_repository
from .synopsis import org_synopsis, repo_synopsis
from .timefilter import TimeWindow

MAX_WORKERS = 8


def verify_result_has_key(json, key, context, dry_run=False):
    """Fail when the root entity of a response is missing, unless dry-running"""
    if not dry_run and (json is None or json.get(key) is None):
        raise QueryError(key, context)
    return json


def _fetcher(token, name, verbose, debug):
    def fetch(query, variables):
        return graphql.execute(query, token, variables=variables, name=name,
                               verbose=verbose, debug=debug)
    return fetch


def repo_contributors(token, user, repo, before=None, after=None, debug=False, dry_run=False,
                      verbose=False, commits=False, reactions=False, full=False):
    """
    Returns all contributions to a repo.

    token   - GitHub auth token
    user    - owner of the repo
    repo    - repo name
    before  - only count contributions up to this timestamp
    after   - only count contributions from this timestamp on
    full    - page through every connection instead of using the first page

    With dry_run the raw response is returned unexamined.
    """
    name = f"{user}/{repo}"
    window = TimeWindow.parse(after, before).resolved()
    fetch = _fetcher(token, name, verbose, debug)

    query, variables = queries.repository(user, repo, window, commits, reactions)
    json = verify_result_has_key(fetch(query, variables), 'repository', name, dry_run)
    if dry_run:
        return json

    if full:
        json = resolve_repository(json, fetch, window, commits, reactions, verbose)
    synopsis = repo_synopsis(json, window, commits, reactions)
    if verbose:
        print(f"Found {len(synopsis.pr_creators)} PR creators and "
              f"{len(synopsis.issue_creators)} issue creators in {name}.", file=sys.stderr)
    return synopsis


def org_contributors(token, org_name, before=None, after=None, debug=False, dry_run=False,
                     verbose=False, commits=False, reactions=False, full=False):
    """
    Returns contributions to all repos owned by org_name, merged across repos.

    Arguments are the same as for repo_contributors.
    """
    window = TimeWindow.parse(after, before).resolved()
    fetch = _fetcher(token, org_name, verbose, debug)

    query, variables = queries.organization(org_name, window, commits, reactions)
    json = verify_result_has_key(fetch(query, variables), 'organization', org_name, dry_run)
    if dry_run:
        return json

    if full:
        json = resolve_organization(json, fetch, window, commits, reactions, verbose)
    synopsis = org_synopsis(json, window, commits, reactions)
    if verbose:
        print(f"Found {len(synopsis.pr_creators)} PR creators and "
              f"{len(synopsis.issue_creators)} issue creators in {org_name}.", file=sys.stderr)
    return synopsis


def from_config(token=None, file=None, config=None, commits=False, reactions=False,
                verbose=False, debug=False, dry_run=False, full=False):
    """
    Returns all contributions to the repos and orgs of a config file.

    Pass either a path as ``file`` or an already parsed ``config`` dict. Every
    repo and org is fetched concurrently; results keep config order. If any
    fetch fails the whole call fails.
    """
    if config is None and file is None:
        raise ConfigurationError('No config file given.')
    config = load_config(file) if config is None else validate_config(config)
    ght = resolve_token(config['token'], token)
    flags = dict(commits=commits, reactions=reactions, full=full,
                 verbose=verbose, debug=debug, dry_run=dry_run)

    with ThreadPoolExecutor(max_workers=MAX_WORKERS) as executor:
        repo_futures = [
            executor.submit(repo_contributors, ght, entry['login'], entry['repo'],
                            before=entry.get('before'), after=entry.get('after'), **flags)
            for entry in config['repos']
        ]
        org_futures = [
            executor.submit(org_contributors, ght, entry['login'],
                            before=entry.get('before'), after=entry.get('after'), **flags)
            for entry in config['orgs']
        ]

        # result() re-raises the first failure in config order
        return {
            'repos': [dict(entry, contributions=future.result())
                      for entry, future in zip(config['repos'], repo_futures)],
            'orgs': [dict(entry, contributions=future.result())
                     for entry, future in zip(config['orgs'], org_futures)],
        }


def current_user(token, verbose=False, debug=False):
    """Returns the login of the user to whom the given token is registered"""
    json = graphql.execute(queries.WHO_AM_I, token, verbose=verbose, debug=debug)
    return queries.clean_who_am_i(json)
