"""
Bucket lister package.

List the S3 buckets of an account and optionally keep only those located in
one region.
"""

from . import args_parser, aws_client_factory, config, errors, lister, regions, s3_operations
from .errors import S3OperationError
from .lister import BucketTally, show_buckets
from .s3_operations import BucketDirectory

__all__ = [
    "BucketDirectory",
    "BucketTally",
    "S3OperationError",
    "args_parser",
    "aws_client_factory",
    "config",
    "errors",
    "lister",
    "regions",
    "s3_operations",
    "show_buckets",
]
