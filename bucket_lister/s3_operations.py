#!/usr/bin/env python3
"""
S3 Operations Module
The two S3 calls the bucket lister depends on: ListBuckets and GetBucketLocation.
"""

import logging
from typing import Iterator, Optional

from botocore.exceptions import BotoCoreError, ClientError

from .errors import S3OperationError
from .regions import normalize_location


class BucketDirectory:
    """Read-only view of the buckets owned by an account."""

    def __init__(self, s3_client, page_size: Optional[int] = None):
        self.s3_client = s3_client
        self.page_size = page_size

    def iter_bucket_pages(self) -> Iterator[dict]:
        """
        Yield ListBuckets result pages one at a time.

        Pages are fetched lazily as the caller advances. A failed page read
        ends the sequence by raising S3OperationError.

        Raises:
            S3OperationError: If any page cannot be fetched
        """
        paginate_kwargs = {}
        if self.page_size:
            paginate_kwargs["PaginationConfig"] = {"PageSize": self.page_size}

        try:
            paginator = self.s3_client.get_paginator("list_buckets")
            pages = iter(paginator.paginate(**paginate_kwargs))
        except (ClientError, BotoCoreError) as e:
            raise S3OperationError.from_error(e).add_message("Failed to list buckets") from e

        page_number = 0
        while True:
            try:
                page = next(pages)
            except StopIteration:
                return
            except (ClientError, BotoCoreError) as e:
                raise S3OperationError.from_error(e).add_message("Failed to list buckets") from e
            page_number += 1
            logging.debug("Fetched ListBuckets page %s", page_number)
            yield page

    def get_bucket_location(self, bucket_name: str) -> str:
        """
        Get the region where an S3 bucket is located.

        Args:
            bucket_name: Name of the S3 bucket

        Returns:
            str: AWS region name ('us-east-1' when LocationConstraint is empty)

        Raises:
            S3OperationError: If the bucket is missing or the call fails
        """
        try:
            response = self.s3_client.get_bucket_location(Bucket=bucket_name)
        except (ClientError, BotoCoreError) as e:
            raise S3OperationError.from_error(e).add_message(
                f"Failed to get location of bucket {bucket_name}"
            ) from e
        location = normalize_location(response.get("LocationConstraint"))
        logging.debug("Bucket %s is in %s", bucket_name, location)
        return location


def bucket_names(page: dict) -> Iterator[str]:
    """Yield the bucket names on a ListBuckets page, '' where a name is absent."""
    for bucket in page.get("Buckets", []):
        yield bucket.get("Name") or ""
