from __future__ import annotations

import json

from ghcontributors.export import flatten, to_csv, to_json
from ghcontributors.models import Contributor, Synopsis


def sample() -> Synopsis:
    return Synopsis(
        pr_creators=[Contributor("alice", "Alice A", "u", 2)],
        pr_commentators=[Contributor("bob", None, "u")],
        issue_creators=[],
        issue_commentators=[Contributor("carol", "Carol, C.", "u")],
    )


def test_flatten_labels_requested_categories() -> None:
    assert flatten(sample()) == [
        ["pr creator", "alice", "Alice A"],
        ["pr commentator", "bob", ""],
        ["issue commentator", "carol", "Carol, C."],
    ]

    with_extras = sample()
    with_extras.commit_authors = [Contributor("dave")]
    with_extras.reactors = [Contributor("erin", "Erin")]
    assert flatten(with_extras)[-2:] == [["commit author", "dave", ""], ["reactor", "erin", "Erin"]]


def test_to_csv() -> None:
    assert to_csv(sample()) == (
        "TYPE,LOGIN,NAME\n"
        "pr creator,alice,Alice A\n"
        "pr commentator,bob,\n"
        'issue commentator,carol,"Carol, C."\n'
    )
    assert to_csv(Synopsis()) == "TYPE,LOGIN,NAME\n"


def test_to_json_handles_batch_results() -> None:
    result = {"repos": [{"login": "octo", "repo": "r", "contributions": sample()}], "orgs": []}
    decoded = json.loads(to_json(result))
    contributions = decoded["repos"][0]["contributions"]
    assert contributions["pr_creators"] == [{"login": "alice", "name": "Alice A", "url": "u", "count": 2}]
    assert contributions["commit_authors"] is None
