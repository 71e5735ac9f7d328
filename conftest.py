import random

import pytest
from fastapi.testclient import TestClient

from backend.app import create_app
from roll_tables import TableSettings


@pytest.fixture
def settings() -> TableSettings:
    """Small limits so range checks are easy to hit."""
    return TableSettings(max_die_size=100, max_table_name_length=20)


@pytest.fixture
def client(settings: TableSettings) -> TestClient:
    return TestClient(create_app(settings))


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
