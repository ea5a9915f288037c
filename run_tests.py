#!/usr/bin/env python3
"""
Test runner for Idea Board.

Picks test files by category and hands everything else to pytest. The
timestamped result file is written by tests/conftest.py.

Usage:
    python run_tests.py                        # Everything
    python run_tests.py -c unit_api,e2e        # Some categories
    python run_tests.py -c unit_views -- -k save   # Extra pytest arguments
    python run_tests.py --list
"""

import argparse
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).parent

# category -> (test file, what it covers)
CATEGORIES = {
    "config": ("test_system_config_validation.py", "env vars, defaults, error messages"),
    "cli": ("test_system_cli_behavior.py", "argument parsing, store selection, exit codes"),
    "e2e": ("test_system_end_to_end.py", "submit, develop and delete over HTTP"),
    "unit_models": ("test_models.py", "ids, Idea and IdeaRecord"),
    "unit_storage": ("test_storage.py", "SQLite, in-memory and Airtable stores"),
    "unit_api": ("test_service.py", "the five idea operations"),
    "unit_client": ("test_client.py", "HTTP client and error kinds"),
    "unit_web": ("test_web_app.py", "Flask routes and pages"),
    "unit_views": ("test_views.py", "form, list and development views"),
}


def build_command(categories, verbose, extra):
    """pytest command line for the chosen categories (all tests when empty)."""
    unknown = [c for c in categories if c not in CATEGORIES]
    if unknown:
        raise SystemExit(f"❌ Unknown categories: {', '.join(unknown)} (see --list)")

    paths = [f"tests/{CATEGORIES[c][0]}" for c in categories] or ["tests/"]
    cmd = [sys.executable, "-m", "pytest", *paths, "-v" if verbose else "--tb=short"]
    return cmd + extra


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run Idea Board tests")
    parser.add_argument("--category", "-c", default="",
                        help="Comma-separated categories to run")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose pytest output")
    parser.add_argument("--list", "-l", action="store_true", help="List categories and exit")
    parser.add_argument("pytest_args", nargs=argparse.REMAINDER,
                        help="Arguments after -- go to pytest unchanged")
    args = parser.parse_args(argv)

    if args.list:
        for name, (path, covers) in CATEGORIES.items():
            print(f"  {name:13} {path:36} {covers}")
        return 0

    categories = [c.strip() for c in args.category.split(",") if c.strip()]
    extra = [a for a in args.pytest_args if a != "--"]
    cmd = build_command(categories, args.verbose, extra)

    print(f"Running: {' '.join(cmd[2:])}")
    return subprocess.run(cmd, cwd=ROOT).returncode


if __name__ == "__main__":
    sys.exit(main())
