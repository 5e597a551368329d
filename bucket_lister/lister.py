"""Show the buckets of an account, optionally only those in one region."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .s3_operations import BucketDirectory, bucket_names


@dataclass
class BucketTally:
    """Counters for one listing pass."""

    total: int = 0
    matched: int = 0


def show_buckets(strict: bool, directory: BucketDirectory, region: str) -> BucketTally:
    """
    Print bucket names and a summary line.

    In strict mode each bucket's location is looked up and only buckets in
    ``region`` are printed. Otherwise every bucket is printed and no lookups
    are made.

    Raises:
        S3OperationError: On the first failed page or location lookup; nothing
            further is printed
    """
    tally = BucketTally()

    for page in directory.iter_bucket_pages():
        for name in bucket_names(page):
            tally.total += 1
            if strict:
                if directory.get_bucket_location(name) == region:
                    print(name)
                    tally.matched += 1
            else:
                print(name)

    print()
    if strict:
        print(
            f"Found {tally.matched} buckets in the {region} region "
            f"out of a total of {tally.total} buckets."
        )
    else:
        print(f"Found {tally.total} buckets in all regions.")

    logging.debug("Listing finished: %s", tally)
    return tally
