"""Command line interface for sdkmodels."""

import argparse
from typing import List, Optional

from .constants import CONFIG_FILENAME, ENV_OUTPUT_FILE, ENV_PROJECT_ROOT, OUTPUT_FORMATS


def build_argument_parser() -> argparse.ArgumentParser:
    """Build the sdkmodels argument parser."""
    parser = argparse.ArgumentParser(
        prog="sdkmodels",
        description="sdkmodels: Extract AI SDK model identifiers from installed type declarations.",
        epilog=f"Project defaults are read from {CONFIG_FILENAME} in the project root.",
        formatter_class=argparse.RawTextHelpFormatter
    )

    scan_group = parser.add_argument_group("Scanning Options")
    scan_group.add_argument(
        "project_root",
        nargs="?",
        default=None,
        help=f"Directory containing node_modules (default: ${ENV_PROJECT_ROOT} or .)"
    )
    scan_group.add_argument(
        "--allow-collisions",
        action="store_true",
        help="Warn instead of failing when two providers produce the same type name"
    )

    out_group = parser.add_argument_group("Output Options")
    out_group.add_argument(
        "-o", "--output-file", default=None, help=f"Output file (default: ${ENV_OUTPUT_FILE} or config)"
    )
    out_group.add_argument("--format", choices=OUTPUT_FORMATS, default=None, help="Output format")
    out_group.add_argument("--dry-run", action="store_true", help="Extract without writing the output file")
    out_group.add_argument("-v", "--verbose", action="store_true", help="Show detailed processing logs")

    meta_group = parser.add_argument_group("Meta Commands")
    meta_group.add_argument(
        "--list-providers", action="store_true", help="List discovered providers and exit"
    )
    meta_group.add_argument(
        "--tree", action="store_true", help="Print the registry as a tree after extraction"
    )

    return parser


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Argument list, defaults to ``sys.argv[1:]``.

    Returns:
        The parsed argparse Namespace.
    """
    return build_argument_parser().parse_args(argv)
