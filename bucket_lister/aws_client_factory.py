#!/usr/bin/env python3
"""
AWS Client Factory Module
Provides the boto3 S3 client used by the bucket lister.
"""

import logging
import os
from pathlib import Path
from typing import Optional

import boto3
from dotenv import load_dotenv


def _resolve_env_path(env_path: Optional[str] = None) -> str:
    """
    Determine which .env file should be used for AWS credentials.

    Priority order:
      1. Explicit parameter
      2. AWS_ENV_FILE environment variable
      3. ~/.env
    """
    if env_path:
        return env_path
    aws_env_file = os.environ.get("AWS_ENV_FILE")
    if aws_env_file:
        return aws_env_file
    return str(Path.home() / ".env")


def load_env_file(env_path: Optional[str] = None) -> bool:
    """
    Load AWS settings from a .env file into the process environment.

    Variables already set in the environment are left untouched. A missing
    file is not an error: boto3 falls back to its own credential chain.

    Returns:
        bool: True if the file existed and was loaded
    """
    resolved_path = _resolve_env_path(env_path)
    if not Path(resolved_path).expanduser().is_file():
        logging.debug("No .env file at %s, using default AWS credential chain", resolved_path)
        return False
    load_dotenv(resolved_path)
    logging.info("✅ AWS settings loaded from %s", resolved_path)
    return True


def create_s3_client(region: str, env_path: Optional[str] = None):
    """
    Create an S3 boto3 client bound to a region.

    Args:
        region: AWS region name used for the client endpoint
        env_path: Optional .env file to load before creating the client

    Returns:
        boto3.client: Configured S3 client
    """
    load_env_file(env_path)
    logging.debug("Creating S3 client in %s", region)
    return boto3.client("s3", region_name=region)
