"""
CLI entry point for the 2PeekMe CLI.

Provides argument parsing, logging setup and dispatch of each
subcommand to its handler.
"""

import argparse
import logging
import sys
from typing import Optional

import coloredlogs
from rich.console import Console

from peekme_cli import __version__
from peekme_cli.client import PeekMeClient, create_client
from peekme_cli.commands import (
    create_key,
    create_subdomain,
    delete_key,
    delete_subdomain,
    key_info,
    list_subdomains,
    set_key,
    update_subdomain,
)
from peekme_cli.config import ConfigStore, LocalConfig
from peekme_cli.constants import API_BASE, CONFIG_FILE, RECORD_TYPE_HINT

logger = logging.getLogger(__name__)

console = Console()


def setup_logging(verbose: bool = False) -> None:
    """
    Configure logging with coloredlogs.

    Parameters:
        verbose: If True, set log level to DEBUG; otherwise WARNING
    """
    level = "DEBUG" if verbose else "WARNING"
    coloredlogs.install(
        level=level,
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        logger=logging.getLogger(),
    )
    # httpx logs full request URLs, API key included
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.WARNING)
    logger.debug("Logging configured at %s level", level)


def _add_key_override(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-k", "--key",
        dest="override_key",
        metavar="KEY",
        help="API key to use for this call only (not saved)",
    )


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser with one subparser per command.

    Returns:
        Configured parser
    """
    parser = argparse.ArgumentParser(
        prog="2peekme",
        description="CLI tool to interact with the 2PeekMe API",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose (DEBUG) logging output",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="<command>")
    subparsers.required = True

    key_parser = subparsers.add_parser("key", help="Manage your API key")
    actions = key_parser.add_mutually_exclusive_group()
    actions.add_argument("-s", "--set", metavar="KEY", help="Set the API key")
    actions.add_argument("-c", "--create", action="store_true", help="Create a new API key")
    actions.add_argument("-d", "--delete", action="store_true", help="Delete the API key")
    actions.add_argument("-i", "--info", action="store_true", help="Get information about the API key")
    _add_key_override(key_parser)

    for command, help_text, value_help in (
        ("create", "Create a new subdomain", "Record value"),
        ("update", "Update an existing subdomain", "New record value"),
    ):
        sub = subparsers.add_parser(command, help=help_text)
        sub.add_argument("-n", "--name", help="Subdomain name")
        sub.add_argument("-t", "--type", dest="record_type", help=f"DNS record type ({RECORD_TYPE_HINT})")
        sub.add_argument("-v", "--value", help=value_help)
        _add_key_override(sub)

    delete_parser = subparsers.add_parser("delete", help="Delete a subdomain")
    delete_parser.add_argument("-n", "--name", help="Subdomain name")
    _add_key_override(delete_parser)

    list_parser = subparsers.add_parser("list", help="List all subdomains")
    _add_key_override(list_parser)

    return parser


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Parameters:
        argv: Arguments to parse, defaults to sys.argv[1:]

    Returns:
        Parsed arguments namespace
    """
    return build_parser().parse_args(argv)


def run_key_command(args: argparse.Namespace, client: PeekMeClient, config: LocalConfig) -> bool:
    """Dispatch the ``key`` subcommand according to its flag."""
    if args.set:
        return set_key(config, args.set)
    if args.create:
        return create_key(client, config)
    if args.delete:
        return delete_key(client, config, args.override_key)
    if args.info:
        return key_info(client, config, args.override_key)

    console.print(
        "[bold yellow]Use --set to configure a key, --create to generate a new key, "
        "--delete to remove a key, or --info to get details.[/bold yellow]"
    )
    return True


def run_command(args: argparse.Namespace, client: PeekMeClient, config: LocalConfig) -> bool:
    """
    Run the parsed command.

    Returns:
        True if the command succeeded
    """
    if args.command == "key":
        return run_key_command(args, client, config)
    if args.command == "create":
        return create_subdomain(client, config, args.name, args.record_type, args.value, args.override_key)
    if args.command == "update":
        return update_subdomain(client, config, args.name, args.record_type, args.value, args.override_key)
    if args.command == "delete":
        return delete_subdomain(client, config, args.name, args.override_key)
    if args.command == "list":
        return list_subdomains(client, config, args.override_key)
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[list[str]] = None) -> None:
    """Main application entry point."""
    args = parse_args(argv)
    setup_logging(verbose=args.verbose)

    logger.debug("Running command %s", args.command)
    config = LocalConfig.load(ConfigStore(CONFIG_FILE))

    try:
        with create_client(API_BASE) as client:
            ok = run_command(args, client, config)
    except KeyboardInterrupt:
        console.print("\n[yellow]⚠[/yellow] Operation cancelled by user")
        logger.info("User exited via keyboard interrupt")
        sys.exit(130)
    except Exception as e:
        console.print(f"[red]✗[/red] Unexpected error: {e}")
        logger.error("Unhandled error: %s", e, exc_info=True)
        sys.exit(1)

    if not ok:
        sys.exit(1)
