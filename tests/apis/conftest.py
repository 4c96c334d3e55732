"""Shared fixtures for API module tests."""

import pytest

from served_sdk import ServedClient

BASE_URL = "https://api.test"


@pytest.fixture
def client() -> ServedClient:
    return ServedClient(BASE_URL, "tok", "acme", register_session=False)
