from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.repo_builder import RepoBuilder


@pytest.fixture
def repo_builder(tmp_path: Path) -> RepoBuilder:
    """A throwaway distribution root that can write `.git/config` remotes."""
    return RepoBuilder(tmp_path)
