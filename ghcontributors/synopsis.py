"""Build contributor synopses from parsed response trees."""

from .merge import merge_synopses, users
from .models import Synopsis, parse_organization, parse_repository
from .timefilter import time_filter


def _contributors(events, window):
    return users(time_filter(events, window))


def tree_synopsis(tree, window=None, commits=False, reactions=False):
    """Synopsis of a single parsed RepositoryTree"""
    prs = tree.pull_requests
    issues = tree.issues

    synopsis = Synopsis(
        pr_creators=_contributors([pr.creation for pr in prs], window),
        pr_commentators=_contributors([c for pr in prs for c in pr.comments], window),
        issue_creators=_contributors([issue.creation for issue in issues], window),
        issue_commentators=_contributors([c for issue in issues for c in issue.comments], window),
    )
    if commits:
        synopsis.commit_authors = _contributors(tree.commits, window)
    if reactions:
        synopsis.reactors = _contributors(
            [r for thread in prs + issues for r in thread.reactions], window)
    return synopsis


def repo_synopsis(json, window=None, commits=False, reactions=False):
    """
    Summarize a ``{"repository": ...}`` response.

    Every category is filtered to the window, stripped of deleted accounts
    and deduplicated by login.
    """
    tree = parse_repository(json['repository'])
    return tree_synopsis(tree, window, commits, reactions)


def org_synopsis(json, window=None, commits=False, reactions=False):
    """Summarize an ``{"organization": ...}`` response across all of its repositories"""
    tree = parse_organization(json['organization'])
    synopsis = merge_synopses(
        tree_synopsis(repo, window, commits, reactions) for repo in tree.repositories)
    # Keep requested categories visible even when the organization has no repositories
    if commits and synopsis.commit_authors is None:
        synopsis.commit_authors = []
    if reactions and synopsis.reactors is None:
        synopsis.reactors = []
    return synopsis
