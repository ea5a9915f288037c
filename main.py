#!/usr/bin/env python3
"""
Idea Board - submit, list, develop and delete ideas.

Command-line entry point for running the web server:
  - Pick the record store (SQLite file, Airtable, or in-memory)
  - Serve the pages and the /api/ideas/* endpoints with Flask

Usage:
    python main.py                       # Serve with the configured store
    python main.py --storage memory      # Throwaway in-memory store
    python main.py --db-path other.db    # Different SQLite file
    python main.py --show-config         # Print configuration and exit

Examples:
    # Local development
    python main.py --debug

    # Bind to all interfaces on port 8000
    python main.py --host 0.0.0.0 --port 8000
"""

import argparse
import sys

from ideabox.config import (
    IDEAS_STORAGE,
    STORAGE_BACKENDS,
    WEB_HOST,
    WEB_PORT,
    DEBUG,
    configure_logging,
    print_config_summary,
    validate_config,
)
from ideabox.storage import create_store
from web.app import create_app


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="idea-board",
        description="Serve the Idea Board web application.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                           Serve with defaults from .env
  %(prog)s --storage memory          Keep ideas in memory only
  %(prog)s --db-path /tmp/ideas.db   Use another SQLite file
  %(prog)s --port 8000 --debug       Debug server on port 8000
        """,
    )

    parser.add_argument(
        "--storage", "-s",
        choices=list(STORAGE_BACKENDS),
        default=None,
        help=f"Record store backend (default: {IDEAS_STORAGE})",
    )

    parser.add_argument(
        "--db-path",
        default=None,
        metavar="PATH",
        help="SQLite database file (sqlite backend only)",
    )

    parser.add_argument(
        "--host",
        default=WEB_HOST,
        help=f"Interface to bind (default: {WEB_HOST})",
    )

    parser.add_argument(
        "--port", "-p",
        type=int,
        default=WEB_PORT,
        help=f"Port to listen on (default: {WEB_PORT})",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        default=DEBUG,
        help="Run Flask in debug mode with verbose logging",
    )

    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Show current configuration and exit",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 1.0.0",
    )

    return parser


def show_config() -> None:
    """Display current configuration."""
    print("=" * 60)
    print("Idea Board Configuration")
    print("=" * 60)
    print_config_summary()

    errors = validate_config()
    if errors:
        print("\nConfiguration warnings:")
        for error in errors:
            print(f"  ⚠️  {error}")
    else:
        print("\n✓ Configuration valid")
    print("=" * 60)


def main(argv: list = None) -> int:
    """
    Main entry point.

    Args:
        argv: Command-line arguments (default: sys.argv[1:]).

    Returns:
        Exit code (0 = success, 1 = error).
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.show_config:
        show_config()
        return 0

    configure_logging("DEBUG" if args.debug else None)

    try:
        store = create_store(args.storage, args.db_path)
    except ValueError as e:
        print(f"❌ {e}")
        return 1

    app = create_app(store=store)

    print("=" * 50)
    print("Idea Board")
    print("=" * 50)
    print(f"Storage: {store.name}")
    print(f"Open http://{args.host}:{args.port} in your browser")
    print("Press Ctrl+C to stop")
    print("=" * 50)

    try:
        app.run(host=args.host, port=args.port, debug=args.debug)
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        return 130
    finally:
        store.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
