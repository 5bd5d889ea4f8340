import pytest

from app.services.user_store import InMemoryUserStore


@pytest.fixture()
def store():
    """Fresh in-memory store per test."""
    return InMemoryUserStore()
