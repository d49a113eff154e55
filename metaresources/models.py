"""Core data models shared across metaresources components."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .errors import EmptyAccountError, EmptyProjectError


@dataclass(frozen=True)
class GithubIdentity:
    """Account and project parsed from a remote URL."""

    account: str
    project: str
    url: str = field(default="", compare=False, repr=False)

    def __post_init__(self) -> None:
        if not self.account:
            raise EmptyAccountError(self.url)
        if not self.project:
            raise EmptyProjectError(self.url)


@dataclass(frozen=True)
class FormatContext:
    """Values available to resource templates."""

    account: str
    project: str
    name: str

    @classmethod
    def from_identity(cls, identity: GithubIdentity, name: str) -> "FormatContext":
        return cls(account=identity.account, project=identity.project, name=name)


@dataclass(frozen=True)
class Distribution:
    """The distribution being built, as provided by the host pipeline."""

    name: str
    root: Optional[Path] = None
