"""Optional YAML settings shared by every command."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError

__all__ = [
    "DEFAULT_SETTINGS_NAME",
    "ENVIRONMENT_OVERRIDES",
    "CLISettings",
    "LoadedSettings",
    "load_settings",
]


DEFAULT_SETTINGS_NAME = ".ccinit.yaml"

# Settings key -> environment variable overriding it.
ENVIRONMENT_OVERRIDES: Mapping[str, str] = {
    "dry-run": "CCINIT_DRY_RUN",
    "verbose": "CCINIT_VERBOSE",
}


class CLISettings(BaseModel):
    """Values read from the settings file and the environment."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    dry_run: bool = Field(False, alias="dry-run", description="Show what would be created without creating it.")
    verbose: bool = Field(False, description="Print additional diagnostics.")


@dataclass(frozen=True, slots=True)
class LoadedSettings:
    settings: CLISettings
    source: Path | None = None


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read config file {path}: {exc.strerror or exc}") from exc

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in config file {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"config file {path} must contain a mapping at the top level")
    return data


def _default_path() -> Path:
    try:
        return Path.home() / DEFAULT_SETTINGS_NAME
    except RuntimeError as exc:
        raise ConfigError(f"cannot determine the home directory: {exc}") from exc


def load_settings(
    config_path: str | Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> LoadedSettings:
    """Load :class:`CLISettings` from ``config_path`` or ``~/.ccinit.yaml``.

    An explicitly requested file must exist. The default file is optional.
    Environment variables listed in :data:`ENVIRONMENT_OVERRIDES` take
    precedence over values from the file.
    """

    environ = os.environ if environ is None else environ
    source: Path | None = None
    data: dict[str, Any] = {}

    if config_path is not None:
        source = Path(config_path).expanduser()
        data = _read_yaml(source)
    else:
        candidate = _default_path()
        if candidate.is_file():
            source = candidate
            data = _read_yaml(candidate)

    for key, variable in ENVIRONMENT_OVERRIDES.items():
        if variable in environ:
            data[key] = environ[variable]

    try:
        settings = CLISettings.model_validate(data)
    except ValidationError as exc:
        origin = source or "environment"
        raise ConfigError(f"invalid settings from {origin}: {exc.errors()[0]['msg']}") from exc

    return LoadedSettings(settings=settings, source=source)
