import pytest


@pytest.fixture
def signing_secret():
    """Secret used to sign entity payloads in tests."""
    return "test-signing-secret"
