from __future__ import annotations

import pytest
import requests

from ghcontributors import graphql
from ghcontributors.errors import TransportError


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self.payload = payload
        self.text = text
        self.content = text.encode()

    def json(self):
        return self.payload


def stub_post(monkeypatch, response):
    sent = {}

    def post(url, headers=None, json=None, timeout=None):
        sent.update(url=url, headers=headers, json=json, timeout=timeout)
        return response

    monkeypatch.setattr(graphql.requests, "post", post)
    return sent


def test_execute_returns_data(monkeypatch) -> None:
    sent = stub_post(monkeypatch, FakeResponse(payload={"data": {"viewer": {"login": "me"}}}))
    data = graphql.execute("query { viewer { login } }", "tok", variables={"a": 1})
    assert data == {"viewer": {"login": "me"}}
    assert sent["url"] == graphql.GITHUB_GRAPHQL_URL
    assert sent["headers"]["Authorization"] == "Bearer tok"
    assert sent["json"] == {"query": "query { viewer { login } }", "variables": {"a": 1}}


def test_execute_http_failure(monkeypatch) -> None:
    stub_post(monkeypatch, FakeResponse(status_code=401, text="Bad credentials"))
    with pytest.raises(TransportError, match="401: Bad credentials") as info:
        graphql.execute("query { viewer { login } }", "bad")
    assert info.value.status_code == 401


def test_execute_errors_without_data(monkeypatch) -> None:
    stub_post(monkeypatch, FakeResponse(payload={"errors": [{"message": "rate limited"}]}))
    with pytest.raises(TransportError, match="rate limited"):
        graphql.execute("query { viewer { login } }", "tok")


def test_execute_keeps_partial_data(monkeypatch, capsys) -> None:
    payload = {"data": {"repository": None}, "errors": [{"type": "NOT_FOUND"}]}
    stub_post(monkeypatch, FakeResponse(payload=payload))
    assert graphql.execute("q", "tok", name="a/b", verbose=True) == {"repository": None}
    assert "NOT_FOUND" in capsys.readouterr().err


def test_network_errors_propagate_unmodified(monkeypatch) -> None:
    def post(*args, **kwargs):
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(graphql.requests, "post", post)
    with pytest.raises(requests.ConnectionError):
        graphql.execute("q", "tok")


def test_debug_prints_query(monkeypatch, capsys) -> None:
    stub_post(monkeypatch, FakeResponse(payload={"data": {}}, text="{}"))
    graphql.execute("query { viewer { login } }", "tok", name="me", debug=True)
    err = capsys.readouterr().err
    assert "Query: query { viewer { login } }" in err
    assert "Response for me" in err
