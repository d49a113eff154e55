"""Error hierarchy for metadata resource generation."""

from __future__ import annotations

from pathlib import Path


class MetaResourcesError(RuntimeError):
    """Base class for all configuration errors raised by this package."""


class OptionsError(MetaResourcesError):
    """Raised when plugin options are invalid or cannot be parsed."""


class GitConfigError(MetaResourcesError):
    """Raised when the Git configuration cannot yield an account and project."""


class MissingConfigFileError(GitConfigError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"GitHubMeta: need a .git/config file, and you don't have one ({path})")


class MissingRemoteError(GitConfigError):
    def __init__(self, remote: str) -> None:
        self.remote = remote
        super().__init__(f"GitHubMeta: no '{remote}' remote found in .git/config")


class MissingURLError(GitConfigError):
    def __init__(self, remote: str) -> None:
        self.remote = remote
        super().__init__(f"GitHubMeta: no url found for remote '{remote}'")


class UnparseableURLError(GitConfigError):
    def __init__(self, url: str, reason: str | None = None) -> None:
        self.url = url
        message = reason or f"GitHubMeta: cannot parse account and project from url '{url}'"
        super().__init__(message)


class EmptyAccountError(UnparseableURLError):
    def __init__(self, url: str) -> None:
        super().__init__(
            url, f"GitHubMeta: no github account name found in .git/config (url '{url}')"
        )


class EmptyProjectError(UnparseableURLError):
    def __init__(self, url: str) -> None:
        super().__init__(
            url,
            f"GitHubMeta: no github repository (project) found in .git/config (url '{url}')",
        )


class TemplateError(MetaResourcesError):
    """Raised when a resource template cannot be rendered."""


class UnknownTransformError(TemplateError):
    def __init__(self, transform: str) -> None:
        self.transform = transform
        super().__init__(f"GitHubMeta: unknown name transform '{transform}'")


__all__ = [
    "EmptyAccountError",
    "EmptyProjectError",
    "GitConfigError",
    "MetaResourcesError",
    "MissingConfigFileError",
    "MissingRemoteError",
    "MissingURLError",
    "OptionsError",
    "TemplateError",
    "UnknownTransformError",
    "UnparseableURLError",
]
