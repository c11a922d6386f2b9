"""CLI entrypoint for class2css."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from class2css import __version__
from class2css.config import load_config
from class2css.constants.branding import CLI_DESCRIPTION, CLI_PROG
from class2css.exceptions import Class2CssError, ConfigError
from class2css.reporting import StatusReporter
from class2css.watch import WatchSession


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog=CLI_PROG,
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    build = subparsers.add_parser("build", help="Scan once and write the CSS output")
    _add_common_arguments(build)
    build.add_argument("--no-stdout", action="store_true", help="Silence the status summary")
    build.add_argument("--no-color", action="store_true", help="Disable colored output")

    watch = subparsers.add_parser("watch", help="Build, then rebuild incrementally as files change")
    _add_common_arguments(watch)

    validate = subparsers.add_parser("validate-config", help="Validate configuration without building")
    validate.add_argument("-r", "--root", type=Path, default=Path("."), help="Project root path")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-r", "--root", type=Path, default=Path("."), help="Project root path")
    parser.add_argument("-c", "--config", type=Path, help="Explicit config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if getattr(args, "verbose", False) else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    if args.command == "validate-config":
        return _handle_validate_config(args)

    try:
        config = load_config(args.root, args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    session = WatchSession(config, config_path=args.config)
    if args.command == "watch":
        return _handle_watch(session)
    if args.command != "build":
        parser.error(f"Unsupported command: {args.command}")

    try:
        result = asyncio.run(session.start())
    except Class2CssError as exc:
        print(f"Build error: {exc}", file=sys.stderr)
        return 1

    if not args.no_stdout:
        use_color = not args.no_color and sys.stdout.isatty()
        print(StatusReporter(session.status(), build=result, color=use_color).render())

    if result is None or result.targets_failed:
        return 1
    return 0


def _handle_watch(session: WatchSession) -> int:
    try:
        asyncio.run(session.run())
    except KeyboardInterrupt:
        print("Stopped watching.", file=sys.stderr)
    return 0


def _handle_validate_config(args: argparse.Namespace) -> int:
    """Load the configuration and report errors."""
    try:
        load_config(args.root, args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
