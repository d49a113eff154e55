"""Metadata provider plugins."""

from .base import MetaProvider
from .resources import MetaResourcesFromGit

__all__ = ["MetaProvider", "MetaResourcesFromGit"]
