from __future__ import annotations

import copy

from ghcontributors.merge import merge_contributions, merge_synopses, users
from ghcontributors.models import Contributor, Event, Synopsis
from ghcontributors.timefilter import parse_timestamp

WHEN = parse_timestamp("2020-01-01")

TEST_USERS = [
    Contributor(login="x", count=1, name="x", url="x"),
    Contributor(login="y", count=1, name="x", url="x"),
    Contributor(login="x", count=3, name="x", url="x"),
    Contributor(login="z", count=2, name="x", url="x"),
]


def test_merge_sums_counts_in_first_seen_order() -> None:
    assert merge_contributions(TEST_USERS) == [
        Contributor(login="x", count=4, name="x", url="x"),
        Contributor(login="y", count=1, name="x", url="x"),
        Contributor(login="z", count=2, name="x", url="x"),
    ]


def test_merge_does_not_modify_inputs() -> None:
    saved = copy.deepcopy(TEST_USERS)
    assert merge_contributions(TEST_USERS, TEST_USERS) == [
        Contributor(login="x", count=8, name="x", url="x"),
        Contributor(login="y", count=2, name="x", url="x"),
        Contributor(login="z", count=4, name="x", url="x"),
    ]
    assert TEST_USERS == saved


def test_merge_n_copies_multiplies_counts() -> None:
    once = merge_contributions(TEST_USERS)
    thrice = merge_contributions(TEST_USERS, TEST_USERS, TEST_USERS)
    assert [(c.login, c.name, c.url) for c in thrice] == [(c.login, c.name, c.url) for c in once]
    assert [c.count for c in thrice] == [3 * c.count for c in once]


def test_merge_is_independent_of_partitioning() -> None:
    whole = merge_contributions(TEST_USERS)
    for split in range(len(TEST_USERS) + 1):
        assert merge_contributions(TEST_USERS[:split], TEST_USERS[split:]) == whole
    assert merge_contributions(*([u] for u in TEST_USERS)) == whole
    assert merge_contributions() == []


def test_first_occurrence_wins_for_name_and_url() -> None:
    merged = merge_contributions(
        [Contributor(login="x", name="First", url="a")],
        [Contributor(login="x", name="Second", url="b", count=2)],
    )
    assert merged == [Contributor(login="x", name="First", url="a", count=3)]


def test_null_users_get_filtered() -> None:
    events = [Event(WHEN, Contributor(login="me", name="just me")), Event(WHEN, None)]
    assert users(events) == [Contributor(login="me", name="just me", count=1)]
    assert users([Event(WHEN, None)]) == []


def test_merge_synopses_per_category() -> None:
    a = Synopsis(pr_creators=[Contributor("x")], issue_commentators=[Contributor("y")])
    b = Synopsis(pr_creators=[Contributor("x", count=2), Contributor("z")], commit_authors=[Contributor("y")])
    merged = merge_synopses([a, b])
    assert merged.pr_creators == [Contributor("x", count=3), Contributor("z")]
    assert merged.issue_commentators == [Contributor("y")]
    assert merged.pr_commentators == []
    assert merged.commit_authors == [Contributor("y")]
    assert merged.reactors is None
