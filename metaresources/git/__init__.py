"""Readers for the local Git repository configuration."""

from .config import ConfigResolver, parse_remote_url, read_git_config

__all__ = ["ConfigResolver", "parse_remote_url", "read_git_config"]
