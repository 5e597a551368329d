"""
Region parsing for bucket location filtering.

S3 reports the location of a bucket as a LocationConstraint. Buckets in
us-east-1 come back with an empty constraint, and some very old eu-west-1
buckets report the legacy value "EU".
"""

from __future__ import annotations

from typing import Optional

from .errors import S3OperationError

US_EAST_1 = "us-east-1"

KNOWN_BUCKET_REGIONS = frozenset(
    {
        "EU",
        "af-south-1",
        "ap-east-1",
        "ap-northeast-1",
        "ap-northeast-2",
        "ap-northeast-3",
        "ap-south-1",
        "ap-south-2",
        "ap-southeast-1",
        "ap-southeast-2",
        "ap-southeast-3",
        "ap-southeast-4",
        "ap-southeast-5",
        "ca-central-1",
        "cn-north-1",
        "cn-northwest-1",
        "eu-central-1",
        "eu-central-2",
        "eu-north-1",
        "eu-south-1",
        "eu-south-2",
        "eu-west-1",
        "eu-west-2",
        "eu-west-3",
        "il-central-1",
        "me-central-1",
        "me-south-1",
        "sa-east-1",
        US_EAST_1,
        "us-east-2",
        "us-gov-east-1",
        "us-gov-west-1",
        "us-west-1",
        "us-west-2",
    }
)


def parse_bucket_region(region: str) -> str:
    """
    Validate a region name as a bucket location.

    Args:
        region: Region name, e.g. "us-west-2"

    Returns:
        str: The region name with surrounding whitespace removed

    Raises:
        S3OperationError: If the region is not a known S3 bucket location
    """
    candidate = (region or "").strip()
    if candidate not in KNOWN_BUCKET_REGIONS:
        raise S3OperationError(
            message=f"'{region}' is not a known S3 bucket location",
            code="InvalidRegion",
        )
    return candidate


def normalize_location(location_constraint: Optional[str]) -> str:
    """Map a GetBucketLocation LocationConstraint to a region name."""
    return location_constraint if location_constraint else US_EAST_1


def client_region(bucket_region: str) -> str:
    """Return the endpoint region for a bucket location ("EU" is eu-west-1)."""
    return "eu-west-1" if bucket_region == "EU" else bucket_region
