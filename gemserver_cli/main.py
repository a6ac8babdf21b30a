"""
Gemserver Admin CLI - Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m gemserver_cli create-key [--permissions VALUE] [--json]
    python -m gemserver_cli delete-key <key> [--json]
    python -m gemserver_cli stats [--json]
    python -m gemserver_cli config --init [--path PATH]
    python -m gemserver_cli config --show

Environment Variables:
    GEMSERVER_HOST              gemserver host (default: looked up with gcloud)
    GEMSERVER_HTTP_TIMEOUT      Request timeout in seconds
    GEMSERVER_RAISE_FOR_STATUS  Fail on non-2xx responses (default: false)
    GEMSERVER_GCLOUD_COMMAND    gcloud executable (default: gcloud)
    GEMSERVER_GCLOUD_PROJECT    Project passed to gcloud app describe
    GEMSERVER_LOG_LEVEL         Log level (default: INFO)
    GEMSERVER_LOG_FILE          Also log to this file
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from gemserver_cli import __version__
from gemserver_cli.commands import keys, stats
from gemserver_cli.commands.common import EXIT_SUCCESS, EXIT_RUNTIME_ERROR
from gemserver_cli.config import load_config, get_default_config_template


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, str(level or "INFO").upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def _add_output_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Print tracebacks on unexpected errors",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="gemserver-admin",
        description="Manage keys and view stats on a private gemserver.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration file (default: ./gemserver.yaml or ~/.config/gemserver/config.yaml)",
    )
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="gemserver host (default: from config, else `gcloud app describe`)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- create-key command ---
    create_parser_ = subparsers.add_parser(
        "create-key",
        help="Create a key",
        description="Create a key on the gemserver and print it.",
    )
    create_parser_.add_argument(
        "--permissions", "-p",
        type=str,
        default=None,
        help="Permissions for the key: read, write, or both (default: server's choice)",
    )
    _add_output_flags(create_parser_)
    create_parser_.set_defaults(func=keys.create_key_cmd)

    # --- delete-key command ---
    delete_parser = subparsers.add_parser(
        "delete-key",
        help="Delete a key",
        description="Delete a key from the gemserver.",
    )
    delete_parser.add_argument(
        "key",
        type=str,
        help="The key to delete",
    )
    _add_output_flags(delete_parser)
    delete_parser.set_defaults(func=keys.delete_key_cmd)

    # --- stats command ---
    stats_parser = subparsers.add_parser(
        "stats",
        help="Show gemserver stats",
        description="Show stored private gems and cached gem dependencies.",
    )
    _add_output_flags(stats_parser)
    stats_parser.set_defaults(func=stats.stats_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage CLI configuration",
        description="Initialize or display configuration.",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        default=False,
        help="Create a template configuration file",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--path",
        type=str,
        default="gemserver.yaml",
        help="Path for config file (default: gemserver.yaml)",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.init:
        config_path = Path(args.path)
        if config_path.exists():
            print(f"Error: Config file already exists: {config_path}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

        config_path.write_text(get_default_config_template())
        print(f"Created configuration file: {config_path}")
        print("\nEdit this file to configure your settings.")
        print("You can also use environment variables (GEMSERVER_* prefix).")
        return EXIT_SUCCESS

    if args.show:
        config_dict = args.cli_config.to_dict()
        if args.host:
            config_dict["host"] = args.host
        print(json.dumps(config_dict, indent=2))
        return EXIT_SUCCESS

    # Default: show help
    print("Usage: gemserver-admin config [--init|--show]")
    print("  --init  Create a template configuration file")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    # Load configuration
    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    # Setup logging
    log_level = args.log_level or config.log_level
    setup_logging(level=log_level, log_file=config.log_file)

    # Attach config to args for commands to use
    args.cli_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if getattr(args, "debug", False):
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
