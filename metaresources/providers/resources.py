"""Homepage, bug tracker and repository resources from Git configuration."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ..errors import OptionsError
from ..formatter import TemplateFormatter
from ..git.config import ConfigResolver
from ..logging import get_logger
from ..models import Distribution, FormatContext
from .base import MetaProvider

DEFAULT_REMOTE = "origin"
DEFAULT_HOMEPAGE = "http://github.com/%a/%r/wiki"
DEFAULT_BUGTRACKER_WEB = "https://rt.cpan.org/Public/Dist/Display.html?Name=%N"
DEFAULT_REPOSITORY_URL = "git://github.com/%a/%r.git"

# Dotted option names as written in build configuration files.
_OPTION_ALIASES = {
    "bugtracker.web": "bugtracker_web",
    "repository.url": "repository_url",
}
_OPTIONS = frozenset({"name", "remote", "homepage", "bugtracker_web", "repository_url"})

_LOGGER = get_logger("providers.resources")


class MetaResourcesFromGit(MetaProvider):
    """Provides resource links built from the distribution name and Git remote.

    The remote URL is read from `.git/config` under the distribution root and
    parsed into an account and project, which together with the distribution
    name fill in the three resource templates.
    """

    def __init__(
        self,
        distribution: Distribution,
        *,
        name: Optional[str] = None,
        remote: str = DEFAULT_REMOTE,
        homepage: str = DEFAULT_HOMEPAGE,
        bugtracker_web: str = DEFAULT_BUGTRACKER_WEB,
        repository_url: str = DEFAULT_REPOSITORY_URL,
        resolver: Optional[ConfigResolver] = None,
    ) -> None:
        self.distribution = distribution
        self._name = name
        self.remote = remote
        self.homepage = homepage
        self.bugtracker_web = bugtracker_web
        self.repository_url = repository_url
        self._resolver = resolver

    @classmethod
    def from_options(
        cls, distribution: Distribution, options: Mapping[str, Any]
    ) -> "MetaResourcesFromGit":
        """Build the provider from raw plugin options, accepting dotted names."""
        kwargs: Dict[str, str] = {}
        for key, value in options.items():
            attr = _OPTION_ALIASES.get(key, key)
            if attr not in _OPTIONS:
                raise OptionsError(f"GitHubMeta: unknown option '{key}'")
            if not isinstance(value, str):
                raise OptionsError(f"GitHubMeta: option '{key}' must be a string")
            kwargs[attr] = value
        return cls(distribution, **kwargs)

    @property
    def name(self) -> str:
        return self._name if self._name is not None else self.distribution.name

    @property
    def resolver(self) -> ConfigResolver:
        if self._resolver is None:
            self._resolver = ConfigResolver(self.distribution.root)
        return self._resolver

    def metadata(self) -> Dict[str, Any]:
        """Return the `resources` fragment for the distribution metadata."""
        _LOGGER.info("Reading resources for %s from remote '%s'", self.name, self.remote)
        identity = self.resolver.resolve(self.remote)
        formatter = TemplateFormatter(FormatContext.from_identity(identity, self.name))

        homepage = formatter.format(self.homepage)
        bugtracker = formatter.format(self.bugtracker_web)
        repository = formatter.format(self.repository_url)
        _LOGGER.debug(
            "Resources: homepage=%s bugtracker=%s repository=%s",
            homepage,
            bugtracker,
            repository,
        )

        return {
            "resources": {
                "homepage": homepage,
                "bugtracker": {"web": bugtracker},
                "repository": {"url": repository},
            }
        }


__all__ = [
    "DEFAULT_BUGTRACKER_WEB",
    "DEFAULT_HOMEPAGE",
    "DEFAULT_REMOTE",
    "DEFAULT_REPOSITORY_URL",
    "MetaResourcesFromGit",
]
