import asyncio

import pytest

from actdash.errors import DiscoveryError, FetchError
from actdash.ingestion import discover_repositories, split_repo_names

from fakes import FakeGhClient


def test_org_listing():
    client = FakeGhClient({"orgs/octo/repos": [{"full_name": "octo/app", "private": False}]})

    repos = asyncio.run(discover_repositories(client, "octo"))

    assert [r.name for r in repos] == ["octo/app"]
    assert client.paths() == ["orgs/octo/repos"]


def test_falls_back_to_user():
    client = FakeGhClient({"users/mona/repos": [{"full_name": "mona/dots", "private": True}]})

    repos = asyncio.run(discover_repositories(client, "mona"))

    assert [r.name for r in repos] == ["mona/dots"]
    assert client.paths() == ["orgs/mona/repos", "users/mona/repos"]


def test_neither_org_nor_user_reports_both_causes():
    client = FakeGhClient({})

    with pytest.raises(DiscoveryError) as exc_info:
        asyncio.run(discover_repositories(client, "ghost"))

    message = str(exc_info.value)
    assert message.startswith("could not find a user or org called 'ghost': ")
    assert "orgs/ghost/repos" in message
    assert "users/ghost/repos" in message


def test_explicit_repositories_skip_discovery():
    client = FakeGhClient({
        "repos/octo/app": {"full_name": "octo/app", "private": True},
        "repos/octo/cli": {"full_name": "octo/cli", "private": False},
    })

    repos = asyncio.run(discover_repositories(client, "octo", ["cli", "app"]))

    assert [r.name for r in repos] == ["octo/cli", "octo/app"]
    assert client.paths() == ["repos/octo/cli", "repos/octo/app"]


def test_explicit_repository_failure():
    client = FakeGhClient({})

    with pytest.raises(FetchError, match="failed to fetch data for octo/nope"):
        asyncio.run(discover_repositories(client, "octo", ["nope"]))


def test_split_repo_names():
    assert split_repo_names(["a,b", "c", " d , ", ""]) == ["a", "b", "c", "d"]
