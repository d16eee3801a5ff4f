"""Logging configuration for the command line interface."""

from __future__ import annotations

import logging
import logging.config
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .errors import ConfigError

__all__ = ["LOG_CONFIG_ENV", "configure_logging", "default_logging_config"]

LOG_CONFIG_ENV = "CCINIT_LOG_CONFIG"


def default_logging_config(verbose: bool) -> dict[str, Any]:
    """Return a :func:`logging.config.dictConfig` payload logging to stderr."""

    level = "DEBUG" if verbose else "WARNING"
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {"format": "%(levelname)s %(name)s: %(message)s"},
        },
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "formatter": "console",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            "ccinit": {"handlers": ["stderr"], "level": level, "propagate": False},
        },
    }


def load_yaml_logging_config(path: Path) -> Any:
    try:
        with path.open(encoding="utf-8") as handle:
            return yaml.safe_load(handle)
    except OSError as exc:
        raise ConfigError(f"cannot read logging config {path}: {exc.strerror or exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in logging config {path}: {exc}") from exc


def configure_logging(verbose: bool, environ: Mapping[str, str] | None = None) -> None:
    """Install the default handlers, then any YAML config named by ``CCINIT_LOG_CONFIG``."""

    environ = os.environ if environ is None else environ
    logging.config.dictConfig(default_logging_config(verbose))

    if LOG_CONFIG_ENV in environ:
        path = Path(environ[LOG_CONFIG_ENV])
        payload = load_yaml_logging_config(path)
        try:
            logging.config.dictConfig(payload)
        except (TypeError, ValueError, AttributeError, ImportError) as exc:
            raise ConfigError(f"invalid logging config {path}: {exc}") from exc
