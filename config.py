"""
Configuration for the S3 bucket region lister.

Values here are the last step of the resolution chain in
bucket_lister/config.py; CLI flags and environment variables win over them.
"""

from typing import Optional

# Region used both as the S3 client region and as the bucket filter target
DEFAULT_REGION: str = "us-west-2"

# ListBuckets page size (None lets S3 choose)
DEFAULT_PAGE_SIZE: Optional[int] = None
