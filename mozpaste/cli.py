#!/usr/bin/env python3
"""
moz-paste - Command Line Interface

Upload a file to paste.mozilla.org and print the link.
"""

import argparse

from . import __version__
from .paste_client import PasteClient
from .logging_utils import setup_logging, get_logger
from .config import config
from .commands import (
    handle_list_expiry_command,
    handle_list_languages_command,
    handle_upload_command,
)
from .languages import SUPPORTED_LANGUAGES
from .models import DEFAULT_EXPIRY, SUPPORTED_EXPIRY

# Get logger for this module
logger = get_logger(__name__)


def _create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="moz-paste",
        description="Upload a file to paste.mozilla.org and print the paste URL",
        epilog="The language is detected from the file name when omitted; "
        "unknown files are pasted as '_code'.",
    )

    parser.add_argument("file", nargs="?", help="Path to the file you want to paste")
    parser.add_argument(
        "expiry",
        nargs="?",
        default=DEFAULT_EXPIRY,
        help=f"When the paste expires: {', '.join(SUPPORTED_EXPIRY)} (default: {DEFAULT_EXPIRY})",
    )
    parser.add_argument(
        "language",
        nargs="?",
        help="Lexer to highlight the paste with (see --list-languages)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Show verbose output"
    )
    parser.add_argument(
        "-L",
        "--list-languages",
        action="store_true",
        help="List all supported languages",
    )
    parser.add_argument(
        "--list-expiry",
        action="store_true",
        help="List all supported expire times",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    return parser


def _initialize_application(args) -> PasteClient:
    """
    Initialize the application components.

    Args:
        args: Parsed command line arguments

    Returns:
        Configured paste client
    """
    setup_logging(
        log_folder=config.get("log_folder"),
        log_basename=config.get("log_basename"),
        max_bytes=config.get("max_log_size_mb", 5) * 1024 * 1024,
        backup_count=config.get("max_log_backups", 10),
        verbose=args.verbose,
    )

    return PasteClient(
        timeout=config.get("timeout"),
        max_redirects=config.get("max_redirects"),
        user_agent=config.get("user_agent"),
    )


def main(argv=None) -> int:
    """Main function to handle command line arguments and route to appropriate handlers."""
    parser = _create_argument_parser()
    args = parser.parse_args(argv)

    if args.list_languages:
        handle_list_languages_command()
        return 0

    if args.list_expiry:
        handle_list_expiry_command()
        return 0

    if not args.file:
        parser.print_help()
        print(f"\nSupported languages: {', '.join(SUPPORTED_LANGUAGES)}")
        return 0

    client = _initialize_application(args)

    return handle_upload_command(
        client,
        args.file,
        args.expiry,
        language=args.language,
    )


if __name__ == "__main__":
    raise SystemExit(main())
