"""Freakend command-line interface (``fxp``).

Usage::

    fxp scaffold --base ./templates/node-express/1.0.0
    fxp inject auth
    fxp add login -f node-express
    fxp init -f node-express --install
    fxp list
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from freakend import __version__
from freakend.config import Config
from freakend.errors import FreakendError, UsageError
from freakend.injector import Injector
from freakend.scaffolder import (
    DEFAULT_CATALOG,
    Scaffolder,
    TemplateRenderer,
    copy_feature,
    init_project,
)
from freakend.scaffolder.init_gen import resolve_framework
from freakend.utils import print_error, print_info, print_summary_table

# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def cmd_scaffold(args: argparse.Namespace, config: Config) -> None:
    base = Path(args.base) if args.base else config.template_root
    Scaffolder(base, extension=config.file_extension).run()


def cmd_inject(args: argparse.Namespace, config: Config) -> None:
    if not args.feature:
        raise UsageError("Please provide a feature name (e.g. 'auth')")
    server_path = Path(args.server) if args.server else config.server_path
    Injector(server_path, port=config.server_port).inject(args.feature)


def cmd_add(args: argparse.Namespace, config: Config) -> None:
    if not args.feature:
        raise UsageError("Please provide a feature name (e.g. 'login')")
    if not args.framework:
        raise UsageError("Please specify a framework using -f or --framework")
    print_info(f"Adding feature '{args.feature}' for framework '{args.framework}'")
    template_root = config.templates_dir / args.framework / config.template_version
    copy_feature(template_root, args.feature, config.output_dir, framework=args.framework)


def cmd_init(args: argparse.Namespace, config: Config) -> None:
    framework = resolve_framework(args.framework)
    print_info(f"Initializing backend project: {framework}")
    init_project(
        config.output_dir,
        framework,
        TemplateRenderer(),
        install=args.install,
        port=config.server_port,
        install_timeout=config.install_timeout,
    )


def cmd_list(args: argparse.Namespace, config: Config) -> None:
    print_summary_table(
        {category: ", ".join(features) for category, features in DEFAULT_CATALOG.items()},
        title=f"Feature catalog ({len(DEFAULT_CATALOG)} features)",
    )


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fxp",
        description="Freakend CLI - Generate backend code instantly",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  fxp scaffold\n"
            "  fxp inject auth\n"
            "  fxp add login -f node-express\n"
            "  fxp init -f node-express --install\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--templates-dir",
        default=None,
        help="Root of the feature template trees (default: ./templates)",
    )

    sub = parser.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    p_scaffold = sub.add_parser("scaffold", help="Create the placeholder feature template tree")
    p_scaffold.add_argument(
        "--base",
        default=None,
        help="Output directory (default: <templates-dir>/<framework>/<version>)",
    )
    p_scaffold.set_defaults(handler=cmd_scaffold)

    p_inject = sub.add_parser("inject", help="Mount a feature router into the server file")
    p_inject.add_argument("feature", nargs="?", help="Feature to mount, e.g. auth")
    p_inject.add_argument(
        "--server",
        default=None,
        help="Server bootstrap file (default: ./freakend.server.js)",
    )
    p_inject.set_defaults(handler=cmd_inject)

    p_add = sub.add_parser("add", help="Add backend features like login, auth, comments")
    p_add.add_argument("feature", nargs="?", help="Feature like login, auth, comments")
    p_add.add_argument("-f", "--framework", default=None, help="Framework like node-express")
    p_add.add_argument("-o", "--output", default=None, help="Project directory (default: .)")
    p_add.set_defaults(handler=cmd_add)

    p_init = sub.add_parser("init", help="Initialize a backend project with boilerplate structure")
    p_init.add_argument("-f", "--framework", default=None, help="Choose your backend framework")
    p_init.add_argument("-o", "--output", default=None, help="Project directory (default: .)")
    p_init.add_argument(
        "--install",
        action="store_true",
        help="Run npm init and install express, mongoose and dotenv",
    )
    p_init.set_defaults(handler=cmd_init)

    p_list = sub.add_parser("list", help="List the available features")
    p_list.set_defaults(handler=cmd_list)

    return parser


def _build_config(args: argparse.Namespace) -> Config:
    """Environment configuration overridden by command-line options."""
    base = Config.from_env()
    overrides: dict[str, Any] = {}
    if args.templates_dir:
        overrides["templates_dir"] = Path(args.templates_dir)
    if getattr(args, "output", None):
        overrides["output_dir"] = Path(args.output)
    if not overrides:
        return base
    return Config(**{**base.model_dump(), **overrides})


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``fxp`` and ``python -m freakend``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = _build_config(args)
    except (ValidationError, ValueError) as exc:
        print_error(f"Invalid configuration: {exc}")
        sys.exit(1)

    try:
        args.handler(args, config)
    except FreakendError as exc:
        print_error(f"Error: {exc}")
        sys.exit(exc.exit_code)


if __name__ == "__main__":
    main()
