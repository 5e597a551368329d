#!/usr/bin/env python3
"""
List S3 buckets in the account, by default only those in one region.

Usage:
    python list_buckets.py                      # Buckets in the default region
    python list_buckets.py --region eu-west-1   # Buckets in eu-west-1
    python list_buckets.py --all                # Every bucket, no location lookups

This is a thin wrapper around the bucket_lister package.
"""
from __future__ import annotations

from bucket_lister.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
