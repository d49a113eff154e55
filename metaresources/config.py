"""Plugin options loading (.metaresources.yml)."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import OptionsError

OPTIONS_FILENAME = ".metaresources.yml"


@dataclass
class PluginOptions:
    """Options for the resources provider; unset values keep their defaults."""

    name: Optional[str] = None
    remote: Optional[str] = None
    homepage: Optional[str] = None
    bugtracker_web: Optional[str] = None
    repository_url: Optional[str] = None

    def as_kwargs(self) -> Dict[str, str]:
        """Return only the options that were set, keyed by provider argument."""
        return {key: value for key, value in asdict(self).items() if value is not None}

    def merged(self, **overrides: Optional[str]) -> "PluginOptions":
        """Return a copy with every non-None override applied."""
        values = asdict(self)
        for key, value in overrides.items():
            if key not in values:
                raise OptionsError(f"Unknown option '{key}'")
            if value is not None:
                values[key] = value
        return PluginOptions(**values)


def load_options(config_path: Path) -> PluginOptions:
    """Load plugin options from disk, returning defaults when the file is absent."""
    config_file = _resolve_options_path(config_path)
    if not config_file.exists():
        return PluginOptions()

    data = _read_options(config_file)
    if not isinstance(data, dict):
        raise OptionsError(f"{OPTIONS_FILENAME} must contain a mapping at the root")

    bugtracker = _as_dict(data.get("bugtracker"))
    repository = _as_dict(data.get("repository"))

    return PluginOptions(
        name=_as_str(data.get("name")),
        remote=_as_str(data.get("remote")),
        homepage=_as_str(data.get("homepage")),
        bugtracker_web=_first_str(data.get("bugtracker.web"), bugtracker.get("web")),
        repository_url=_first_str(data.get("repository.url"), repository.get("url")),
    )


def _resolve_options_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / OPTIONS_FILENAME).resolve()
    return config_path.resolve()


def _read_options(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise OptionsError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _first_str(*values: Any) -> Optional[str]:
    for value in values:
        result = _as_str(value)
        if result is not None:
            return result
    return None


__all__ = ["OPTIONS_FILENAME", "PluginOptions", "load_options"]
