"""Placeholder substitution for resource URL templates.

Templates are free-form strings in which a small closed set of codes is
replaced:

    %a          account parsed from the remote URL
    %r          repository (project) parsed from the remote URL
    %N          distribution name
    %{lc}N      distribution name in lower case
    %{uc}N      distribution name in upper case
    %{deb}N     distribution name as a Debian package name (libfoo-bar-perl)

Any other `%` sequence is copied through unchanged.
"""

from __future__ import annotations

from enum import Enum

from .errors import UnknownTransformError
from .models import FormatContext


class Transform(Enum):
    """Case and format conversions available to the `%N` code."""

    IDENTITY = ""
    LC = "lc"
    UC = "uc"
    DEB = "deb"

    @classmethod
    def from_name(cls, name: str) -> "Transform":
        try:
            return cls(name)
        except ValueError:
            raise UnknownTransformError(name) from None

    def apply(self, value: str) -> str:
        if self is Transform.LC:
            return value.lower()
        if self is Transform.UC:
            return value.upper()
        if self is Transform.DEB:
            return f"lib{value.lower()}-perl"
        return value


_CODES = frozenset({"a", "r", "N"})


def format_template(template: str, context: FormatContext) -> str:
    """Render `template`, substituting recognised codes from `context`."""
    output: list[str] = []
    index = 0
    length = len(template)
    while index < length:
        char = template[index]
        if char != "%":
            output.append(char)
            index += 1
            continue

        transform_name = ""
        cursor = index + 1
        if cursor < length and template[cursor] == "{":
            close = template.find("}", cursor + 1)
            if close == -1:
                output.append(char)
                index += 1
                continue
            transform_name = template[cursor + 1 : close]
            cursor = close + 1

        if cursor >= length or template[cursor] not in _CODES:
            output.append(char)
            index += 1
            continue

        output.append(_expand(template[cursor], transform_name, context))
        index = cursor + 1
    return "".join(output)


def _expand(code: str, transform_name: str, context: FormatContext) -> str:
    if code == "a":
        return context.account
    if code == "r":
        return context.project
    return Transform.from_name(transform_name).apply(context.name)


class TemplateFormatter:
    """Renders several templates against one shared context."""

    def __init__(self, context: FormatContext) -> None:
        self.context = context

    def format(self, template: str) -> str:
        return format_template(template, self.context)


__all__ = ["TemplateFormatter", "Transform", "format_template"]
