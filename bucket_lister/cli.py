"""
Command-line interface and main entry point for the bucket lister.
"""

from __future__ import annotations

import logging
import sys

from botocore.exceptions import BotoCoreError, ClientError

from .args_parser import parse_args
from .aws_client_factory import create_s3_client
from .config import resolve_page_size, resolve_region
from .errors import ConfigurationError, S3OperationError
from .lister import show_buckets
from .regions import client_region, parse_bucket_region
from .s3_operations import BucketDirectory


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the bucket lister CLI."""
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    try:
        region = resolve_region(args.region)
        page_size = resolve_page_size(args.page_size)
        bucket_region = parse_bucket_region(region)
    except (ConfigurationError, S3OperationError) as exc:
        print(repr(exc), file=sys.stderr)
        return 1

    try:
        s3_client = create_s3_client(client_region(bucket_region), env_path=args.env_file)
    except (ClientError, BotoCoreError) as exc:
        error = S3OperationError.from_error(exc).add_message("Failed to create S3 client")
        print(repr(error), file=sys.stderr)
        return 1
    directory = BucketDirectory(s3_client, page_size=page_size)

    try:
        show_buckets(args.strict, directory, bucket_region)
    except S3OperationError as exc:
        # Listing failures are reported, not fatal.
        logging.debug("Bucket listing aborted", exc_info=True)
        print(repr(exc), file=sys.stderr)
    return 0
