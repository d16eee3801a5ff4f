"""Command line interface for ccinit."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from . import __version__
from .config import ProjectConfig
from .detector import detect_existing
from .errors import CCInitError, ConfigError, WorkingDirectoryError
from .log import configure_logging
from .scaffold import ProjectInitializer
from .settings import DEFAULT_SETTINGS_NAME, load_settings

LOGGER = logging.getLogger(__name__)


def _persistent_arguments(*, suppress: bool) -> argparse.ArgumentParser:
    # Subcommands re-declare the shared flags with SUPPRESS defaults so a flag
    # given after the subcommand does not reset one given before it.
    parent = argparse.ArgumentParser(add_help=False)
    defaults = {"default": argparse.SUPPRESS if suppress else None}
    parent.add_argument(
        "--config",
        type=Path,
        help=f"config file (default is $HOME/{DEFAULT_SETTINGS_NAME})",
        **defaults,
    )
    parent.add_argument(
        "--dry-run",
        action=argparse.BooleanOptionalAction,
        help="show what would be created without creating",
        **defaults,
    )
    parent.add_argument(
        "-v",
        "--verbose",
        action=argparse.BooleanOptionalAction,
        help="verbose output",
        **defaults,
    )
    return parent


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ccinit",
        description="Optimize any project for Claude Code development",
        parents=[_persistent_arguments(suppress=False)],
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser(
        "init",
        help="initialize Claude Code optimization for the current project",
        description=(
            "Add a .claude/ directory, CLAUDE.md, development workflows and related "
            "files to the current project. Existing Claude Code files are left "
            "untouched unless --overwrite is given."
        ),
        parents=[_persistent_arguments(suppress=True)],
    )
    init_parser.add_argument("-d", "--description", default="", help="Project description")
    init_parser.add_argument(
        "-g",
        "--github",
        default="",
        metavar="USERNAME",
        help="GitHub username for integration",
    )
    init_parser.add_argument(
        "-o",
        "--overwrite",
        action="store_true",
        help="Overwrite existing files",
    )

    return parser


def _current_directory() -> Path:
    try:
        return Path.cwd()
    except OSError as exc:
        raise WorkingDirectoryError(
            f"failed to get current directory: {exc.strerror or exc}"
        ) from exc


def _handle_init(args: argparse.Namespace, *, dry_run: bool, verbose: bool) -> int:
    cwd = _current_directory()
    try:
        config = ProjectConfig.from_directory(
            cwd,
            description=args.description,
            github_username=args.github,
            overwrite=args.overwrite,
            dry_run=dry_run,
            verbose=verbose,
        )
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc

    existing = detect_existing(cwd)
    if existing and not config.overwrite:
        print(f"Found existing Claude Code files: {', '.join(existing)}")
        print("Use --overwrite to replace existing files")
        print("Or run with different flags to add missing files")
        return 0

    if config.verbose:
        print(f"Initializing Claude Code optimization for: {config.name}")
        print(f"Description: {config.description}")
        if config.github_enabled:
            print(f"GitHub integration: {config.github_username}")

    initializer = ProjectInitializer()

    if config.dry_run:
        plan = initializer.plan(config)
        print("DRY RUN - No files will be created")
        for directory in plan.directories:
            print(f"  would create {directory}/")
        for entry in plan.manifest:
            print(f"  would write  {entry.path}")
        return 0

    try:
        initializer.initialize(config, cwd)
    except CCInitError as exc:
        raise CCInitError(f"failed to initialize Claude Code optimization: {exc}") from exc

    print(f"Successfully initialized Claude Code optimization for {config.name}")
    print("\nNext steps:")
    print("1. Review the generated CLAUDE.md file")
    print("2. Check the .claude/ directory for examples")
    print("3. Run 'claude' to start using Claude Code")
    if config.github_enabled:
        print("4. Commit and push your changes to GitHub")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        loaded = load_settings(args.config)
        # Flags left unset fall back to the settings file and environment.
        dry_run = loaded.settings.dry_run if args.dry_run is None else args.dry_run
        verbose = loaded.settings.verbose if args.verbose is None else args.verbose
        configure_logging(verbose)
        if verbose and loaded.source is not None:
            print(f"Using config file: {loaded.source}", file=sys.stderr)

        if args.command == "init":
            return _handle_init(args, dry_run=dry_run, verbose=verbose)
    except CCInitError as exc:
        LOGGER.debug("command failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    parser.error("no command provided")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
