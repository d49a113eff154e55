"""Resolve the hosting account and project from `.git/config`."""

from __future__ import annotations

import configparser
import re
from pathlib import Path
from typing import Dict, Optional

from ..errors import (
    GitConfigError,
    MissingConfigFileError,
    MissingRemoteError,
    MissingURLError,
    UnparseableURLError,
)
from ..logging import get_logger
from ..models import GithubIdentity

_GIT_DIR = ".git"
_CONFIG_FILE = "config"

# `<sep><account>/<project>.git` anchored at the end of the URL.
_REMOTE_URL_PATTERN = re.compile(r"[:/](?P<account>[^:/]*)/(?P<project>[^/]*)\.git\Z")

RemoteConfig = Dict[str, Dict[str, str]]

_LOGGER = get_logger("git.config")


def read_git_config(path: Path) -> RemoteConfig:
    """Parse an INI-style Git configuration file into plain nested dicts."""
    parser = configparser.ConfigParser(
        strict=False,
        interpolation=None,
        allow_no_value=True,
        inline_comment_prefixes=("#", ";"),
    )
    # Git ignores indentation; configparser would read it as a continuation.
    try:
        with path.open(encoding="utf-8", errors="surrogateescape") as handle:
            parser.read_file((line.lstrip() for line in handle), source=str(path))
    except configparser.Error as exc:
        raise GitConfigError(f"GitHubMeta: failed to parse {path}: {exc}") from exc
    except OSError as exc:
        raise GitConfigError(f"GitHubMeta: cannot read {path}: {exc}") from exc

    config: RemoteConfig = {}
    for section in parser.sections():
        values: Dict[str, str] = {}
        for key, value in parser.items(section, raw=True):
            values[key] = _unquote(value or "")
        config[section] = values
    return config


def parse_remote_url(url: str) -> GithubIdentity:
    """Extract the account and project from a clone URL ending in `.git`."""
    match = _REMOTE_URL_PATTERN.search(url)
    if match is None:
        raise UnparseableURLError(url)
    return GithubIdentity(
        account=match.group("account"),
        project=match.group("project"),
        url=url,
    )


class ConfigResolver:
    """Looks up a named remote in `<root>/.git/config` and parses its URL."""

    def __init__(self, root: Optional[Path] = None) -> None:
        self._root = Path(root) if root is not None else None

    @property
    def config_path(self) -> Path:
        root = self._root if self._root is not None else Path.cwd()
        return root / _GIT_DIR / _CONFIG_FILE

    def resolve(self, remote: str = "origin") -> GithubIdentity:
        path = self.config_path
        if not path.is_file():
            raise MissingConfigFileError(path)

        _LOGGER.debug("Reading remote '%s' from %s", remote, path)
        config = read_git_config(path)

        section = config.get(f'remote "{remote}"')
        if section is None:
            raise MissingRemoteError(remote)

        url = section.get("url", "")
        if not url:
            raise MissingURLError(remote)

        identity = parse_remote_url(url)
        _LOGGER.debug(
            "Remote '%s' resolves to account=%s project=%s",
            remote,
            identity.account,
            identity.project,
        )
        return identity


def _unquote(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1]
    return value


__all__ = ["ConfigResolver", "RemoteConfig", "parse_remote_url", "read_git_config"]
