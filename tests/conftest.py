"""Shared fixtures: quiet logging and a throwaway SQLite database per test."""

import pytest

from ims.infrastructure.config import DatabaseConfig
from ims.infrastructure.log import configure_logging
from ims.infrastructure.persistence.database import Database
from ims.infrastructure.persistence.sql_product_repository import SqlProductRepository


@pytest.fixture(scope="session", autouse=True)
def quiet_logging():
    configure_logging("CRITICAL")


@pytest.fixture
def database(tmp_path):
    db = Database(DatabaseConfig(url=f"sqlite:///{tmp_path / 'inventory.db'}", pool_size=2))
    db.create_schema()
    yield db
    db.dispose()


@pytest.fixture
def sql_repo(database):
    return SqlProductRepository(database)
