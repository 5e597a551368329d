"""
Argument parsing for the bucket lister CLI.
"""

from __future__ import annotations

import argparse


def _positive_int(value: str) -> int:
    """argparse type for strictly positive integers."""
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from exc
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Build the ArgumentParser for list_buckets.py."""
    parser = argparse.ArgumentParser(
        description="List S3 buckets, by default only those located in one region."
    )
    parser.add_argument(
        "--region",
        help="Region to filter on and to create the S3 client in "
        "(default: $BUCKET_LISTER_REGION or DEFAULT_REGION from config.py).",
    )
    parser.add_argument(
        "--all",
        dest="strict",
        action="store_false",
        help="List buckets in every region without looking up locations.",
    )
    parser.add_argument(
        "--page-size",
        type=_positive_int,
        metavar="N",
        help="Number of buckets requested per ListBuckets page.",
    )
    parser.add_argument(
        "--env-file",
        help="Path to a .env file with AWS settings (default: $AWS_ENV_FILE or ~/.env).",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return create_parser().parse_args(argv)
