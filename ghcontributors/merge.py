"""Deduplicate contributors by login and sum their counts."""

from dataclasses import replace

from .models import Synopsis


def merge_contributions(*sequences):
    """
    Combine any number of contributor lists into one list keyed by login.

    Counts are summed. Name and url come from the first record seen for a
    login and the output keeps first-seen order, so merging [a, b] gives the
    same result as merging a + b. Input records are never modified.
    """
    merged = {}
    for sequence in sequences:
        for contributor in sequence:
            seen = merged.get(contributor.login)
            if seen is None:
                merged[contributor.login] = replace(contributor)
            else:
                merged[contributor.login] = replace(seen, count=seen.count + contributor.count)
    return list(merged.values())


def users(events):
    """Merged authors of the given events, skipping deleted accounts"""
    return merge_contributions([event.author for event in events if event.author is not None])


def merge_synopses(synopses):
    """Merge synopses category by category, e.g. across an organization's repositories"""
    synopses = list(synopses)
    combined = Synopsis()
    for category, _ in Synopsis().categories():
        setattr(combined, category, merge_contributions(*(getattr(s, category) for s in synopses)))
    for category in ('commit_authors', 'reactors'):
        present = [getattr(s, category) for s in synopses if getattr(s, category) is not None]
        if present:
            setattr(combined, category, merge_contributions(*present))
    return combined
