from __future__ import annotations

import pytest

from readmegen.errors import InvalidRepositoryReference
from readmegen.github import RepositoryReference, parse_repository_url


@pytest.mark.parametrize(
    "url",
    [
        "https://github.com/octocat/hello-world",
        "https://github.com/octocat/hello-world/",
        "https://github.com/octocat/hello-world.git",
        "http://www.github.com/octocat/hello-world",
        "  https://GitHub.com/octocat/hello-world  ",
    ],
)
def test_parse_accepts_repository_urls(url: str) -> None:
    assert parse_repository_url(url) == RepositoryReference("octocat", "hello-world")


@pytest.mark.parametrize(
    "url",
    [
        "",
        "github.com/octocat/hello-world",
        "https://gitlab.com/octocat/hello-world",
        "https://github.com/octocat",
        "https://github.com/octocat/hello-world/tree/main",
        "https://github.com/octocat/hello-world?tab=readme",
        "https://notgithub.com/octocat/hello-world",
    ],
)
def test_parse_rejects_other_urls(url: str) -> None:
    with pytest.raises(InvalidRepositoryReference):
        parse_repository_url(url)


def test_invalid_reference_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        parse_repository_url("not a url")


def test_reference_helpers() -> None:
    reference = RepositoryReference("octocat", "hello-world")

    assert reference.full_name == "octocat/hello-world"
    assert reference.url == "https://github.com/octocat/hello-world"
