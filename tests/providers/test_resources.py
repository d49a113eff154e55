"""Tests for the Git-backed resources provider."""

from __future__ import annotations

import pytest

from metaresources.errors import (
    MissingConfigFileError,
    MissingRemoteError,
    OptionsError,
    UnknownTransformError,
)
from metaresources.git.config import ConfigResolver
from metaresources.models import Distribution, GithubIdentity
from metaresources.providers import MetaProvider, MetaResourcesFromGit


class _CountingResolver(ConfigResolver):
    def __init__(self) -> None:
        super().__init__()
        self.calls: list[str] = []

    def resolve(self, remote: str = "origin") -> GithubIdentity:
        self.calls.append(remote)
        return GithubIdentity("oalders", "test-repo")


def test_metadata_uses_default_templates(repo_builder) -> None:
    repo_builder.git_config({"origin": "git@github.com:oalders/test-repo.git"})
    provider = MetaResourcesFromGit(repo_builder.distribution("Test-Repo"))

    assert isinstance(provider, MetaProvider)
    assert provider.metadata() == {
        "resources": {
            "homepage": "http://github.com/oalders/test-repo/wiki",
            "bugtracker": {
                "web": "https://rt.cpan.org/Public/Dist/Display.html?Name=Test-Repo"
            },
            "repository": {"url": "git://github.com/oalders/test-repo.git"},
        }
    }


def test_metadata_honours_template_overrides(repo_builder) -> None:
    repo_builder.git_config({"origin": "git@github.com:oalders/test-repo.git"})
    provider = MetaResourcesFromGit.from_options(
        repo_builder.distribution("Test-Repo"),
        {"repository.url": "%{deb}N", "bugtracker.web": "https://github.com/%a/%r/issues"},
    )

    resources = provider.metadata()["resources"]

    assert resources["repository"] == {"url": "libtest-repo-perl"}
    assert resources["bugtracker"] == {"web": "https://github.com/oalders/test-repo/issues"}
    assert resources["homepage"] == "http://github.com/oalders/test-repo/wiki"


def test_metadata_reads_selected_remote(repo_builder) -> None:
    repo_builder.git_config(
        {
            "origin": "git@github.com:me/test-repo.git",
            "upstream": "https://github.com/oalders/test-repo.git",
        }
    )
    provider = MetaResourcesFromGit(repo_builder.distribution("Test-Repo"), remote="upstream")

    assert provider.metadata()["resources"]["homepage"] == "http://github.com/oalders/test-repo/wiki"


def test_name_defaults_to_distribution_and_can_be_overridden(repo_builder) -> None:
    distribution = repo_builder.distribution("Test-Repo")

    assert MetaResourcesFromGit(distribution).name == "Test-Repo"
    assert MetaResourcesFromGit(distribution, name="Other-Dist").name == "Other-Dist"


def test_metadata_resolves_remote_once_per_call() -> None:
    resolver = _CountingResolver()
    provider = MetaResourcesFromGit(
        Distribution(name="Test-Repo"),
        remote="upstream",
        resolver=resolver,
    )

    provider.metadata()

    assert resolver.calls == ["upstream"]


def test_metadata_requires_git_config(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    provider = MetaResourcesFromGit(Distribution(name="Test-Repo"))

    with pytest.raises(MissingConfigFileError):
        provider.metadata()


def test_metadata_requires_configured_remote(repo_builder) -> None:
    repo_builder.git_config({"origin": "git@github.com:oalders/test-repo.git"})
    provider = MetaResourcesFromGit.from_options(
        repo_builder.distribution("Test-Repo"), {"remote": "upstream"}
    )

    with pytest.raises(MissingRemoteError):
        provider.metadata()


def test_metadata_produces_nothing_on_template_error(repo_builder) -> None:
    repo_builder.git_config({"origin": "git@github.com:oalders/test-repo.git"})
    provider = MetaResourcesFromGit(
        repo_builder.distribution("Test-Repo"), repository_url="%{rot13}N"
    )

    with pytest.raises(UnknownTransformError):
        provider.metadata()


def test_from_options_rejects_unknown_keys() -> None:
    with pytest.raises(OptionsError):
        MetaResourcesFromGit.from_options(Distribution(name="X"), {"bugtracker.mailto": "x"})


def test_from_options_rejects_non_string_values() -> None:
    with pytest.raises(OptionsError):
        MetaResourcesFromGit.from_options(Distribution(name="X"), {"remote": 3})
