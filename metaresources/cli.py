"""CLI entrypoint for printing distribution resource metadata."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict

import yaml

from .config import load_options
from .errors import MetaResourcesError
from .logging import configure_logging, get_logger
from .models import Distribution
from .providers import MetaResourcesFromGit

_LOGGER = get_logger("cli")


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="metaresources",
        description="Derive homepage, bug tracker and repository links from Git configuration.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write a DEBUG-level log to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    resources_parser = subparsers.add_parser(
        "resources",
        help="Print the resources metadata for a distribution.",
    )
    _add_verbose_option(resources_parser, suppress_default=True)
    resources_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the distribution root (defaults to current directory).",
    )
    resources_parser.add_argument(
        "--name",
        help="Distribution name substituted for %%N (defaults to the root directory name).",
    )
    resources_parser.add_argument(
        "--remote",
        help="Git remote to read the URL from (defaults to origin).",
    )
    resources_parser.add_argument("--homepage", help="Template for the homepage link.")
    resources_parser.add_argument(
        "--bugtracker-web",
        dest="bugtracker_web",
        help="Template for the bug tracker link.",
    )
    resources_parser.add_argument(
        "--repository-url",
        dest="repository_url",
        help="Template for the repository link.",
    )
    resources_parser.add_argument(
        "--format",
        choices=("json", "yaml"),
        default="json",
        help="Output format for the metadata document.",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for metaresources commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    if args.command == "resources":
        try:
            metadata = _resources(args)
        except MetaResourcesError as exc:
            parser.exit(1, f"{exc}\n")
        print(_render(metadata, args.format))
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _resources(args: argparse.Namespace) -> Dict[str, Any]:
    root = Path(args.path).expanduser().resolve()
    options = load_options(root).merged(
        name=args.name,
        remote=args.remote,
        homepage=args.homepage,
        bugtracker_web=args.bugtracker_web,
        repository_url=args.repository_url,
    )
    distribution = Distribution(name=options.name or root.name, root=root)
    _LOGGER.debug("Distribution %s at %s", distribution.name, root)
    provider = MetaResourcesFromGit(distribution, **options.as_kwargs())
    return provider.metadata()


def _render(metadata: Dict[str, Any], output_format: str) -> str:
    if output_format == "yaml":
        return yaml.safe_dump(metadata, default_flow_style=False, sort_keys=False).rstrip()
    return json.dumps(metadata, indent=2)


if __name__ == "__main__":
    main(sys.argv[1:])
