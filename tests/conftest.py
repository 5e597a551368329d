"""Shared pytest fixtures for test files."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from bucket_lister.config import PAGE_SIZE_ENV_VAR, REGION_ENV_VAR


@pytest.fixture(autouse=True)
def stub_boto3_client(monkeypatch):
    """Replace boto3.client with a stub so tests don't call real AWS."""

    def fake_client(service_name, **kwargs):
        client = MagicMock(name=f"{service_name}-client")
        client.region_name = kwargs.get("region_name")
        return client

    monkeypatch.setattr("boto3.client", fake_client)


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep the developer's own settings and ~/.env out of the tests."""
    monkeypatch.delenv(REGION_ENV_VAR, raising=False)
    monkeypatch.delenv(PAGE_SIZE_ENV_VAR, raising=False)
    monkeypatch.setenv("AWS_ENV_FILE", str(tmp_path / "missing.env"))


@pytest.fixture
def env_file(tmp_path):
    """Write a .env file with fake AWS settings and return its path."""
    path = tmp_path / ".env"
    path.write_text("BUCKET_LISTER_TEST_MARKER=loaded\n", encoding="utf-8")
    return str(path)
