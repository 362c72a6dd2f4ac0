"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture
def transfer_tir() -> str:
    """Short TIR body used in resolve tests."""
    return "ab6466656573a1694576616c506172616d"


@pytest.fixture
def mock_settings():
    """Create test settings."""
    from trp_adapter.config import TRPSettings

    return TRPSettings(
        endpoint="https://trp.test.example/rpc",
        api_key="test-api-key",
        retry_attempts=2,
        retry_min_wait_seconds=0,
        retry_max_wait_seconds=0,
    )
