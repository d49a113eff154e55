"""Metadata resource URLs derived from the local Git configuration."""

from .errors import MetaResourcesError
from .formatter import TemplateFormatter, Transform, format_template
from .git.config import ConfigResolver
from .models import Distribution, FormatContext, GithubIdentity
from .providers import MetaProvider, MetaResourcesFromGit

__version__ = "1.103620"

__all__ = [
    "ConfigResolver",
    "Distribution",
    "FormatContext",
    "GithubIdentity",
    "MetaProvider",
    "MetaResourcesError",
    "MetaResourcesFromGit",
    "TemplateFormatter",
    "Transform",
    "format_template",
]
