"""Pytest configuration and fixtures."""

import pytest

from credit_schedule.generators import sample_schedule_request
from credit_schedule.models import ScheduleRequest, User
from credit_schedule.services import CreditService
from credit_schedule.store import CreditDataStore


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def sample_request() -> ScheduleRequest:
    """Reference scenario: 150 000 over 240 months at 10.5% TEA."""
    return sample_schedule_request(cok_rate=15.0)


@pytest.fixture
def sample_user() -> User:
    """Sample user."""
    return User(user_id=1, username="jperez", email="jperez@example.com")


@pytest.fixture
def store(sample_user: User) -> CreditDataStore:
    """Store seeded with reference data and one user."""
    store = CreditDataStore.with_defaults()
    store.add_user(sample_user)
    return store


@pytest.fixture
def service(store: CreditDataStore) -> CreditService:
    """Credit service backed by the seeded store."""
    return CreditService(store=store)
