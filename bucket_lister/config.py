"""
Configuration resolution for the bucket lister.

Each setting is taken from the first place that defines it: the command line,
the environment, then the project config.py.
"""

from __future__ import annotations

import os

import config as config_module

from .errors import ConfigurationError

REGION_ENV_VAR = "BUCKET_LISTER_REGION"
PAGE_SIZE_ENV_VAR = "BUCKET_LISTER_PAGE_SIZE"


def determine_default_region() -> str:
    """Return the region to use when none is given on the command line."""
    env_val = os.environ.get(REGION_ENV_VAR)
    if env_val:
        return env_val
    return config_module.DEFAULT_REGION


def determine_default_page_size() -> int | None:
    """
    Return the ListBuckets page size when none is given on the command line.

    Raises:
        ConfigurationError: If the environment value is not a positive integer.
    """
    env_val = os.environ.get(PAGE_SIZE_ENV_VAR)
    if not env_val:
        return config_module.DEFAULT_PAGE_SIZE
    try:
        page_size = int(env_val)
    except ValueError as exc:
        raise ConfigurationError(f"{PAGE_SIZE_ENV_VAR} must be an integer, got {env_val!r}") from exc
    if page_size <= 0:
        raise ConfigurationError(f"{PAGE_SIZE_ENV_VAR} must be positive, got {page_size}")
    return page_size


def resolve_region(explicit: str | None = None) -> str:
    """Return the explicit region if given, otherwise the configured default."""
    if explicit:
        return explicit
    return determine_default_region()


def resolve_page_size(explicit: int | None = None) -> int | None:
    """Return the explicit page size if given, otherwise the configured default."""
    if explicit is not None:
        return explicit
    return determine_default_page_size()
