"""Database engine, connection pool and table definitions.

One ``Database`` is created at process start from a ``DatabaseConfig``
and disposed at exit. Repositories borrow a pooled connection per
operation through ``connect()``.
"""

from __future__ import annotations

from sqlalchemy import (
    Column,
    Connection,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    create_engine,
)
from sqlalchemy.engine import Engine, make_url
import structlog

from ims.domain.validation import PRICE_DECIMAL_PLACES
from ims.infrastructure.config import DatabaseConfig

logger = structlog.get_logger(__name__)

metadata = MetaData()

products = Table(
    "products",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("quantity", Integer, nullable=False),
    Column("name", String(255), nullable=False),
    Column("unit_price", Numeric(12, PRICE_DECIMAL_PLACES), nullable=True),
)


class Database:

    def __init__(self, config: DatabaseConfig) -> None:
        self._config = config
        self._engine: Engine = create_engine(
            config.url, pool_pre_ping=True, **_pool_options(config)
        )
        logger.debug("engine_created", pool_size=config.pool_size)

    @property
    def engine(self) -> Engine:
        return self._engine

    def connect(self) -> Connection:
        """Check a connection out of the pool. Use as a context manager."""
        return self._engine.connect()

    def create_schema(self) -> None:
        """Create missing tables; existing tables are left untouched."""
        metadata.create_all(self._engine)
        logger.info("schema_created", tables=sorted(metadata.tables))

    def dispose(self) -> None:
        self._engine.dispose()
        logger.debug("engine_disposed")


def _pool_options(config: DatabaseConfig) -> dict:
    """``pool_size`` is a hard cap: no overflow connections beyond it.

    In-memory SQLite uses a per-thread pool that only takes ``pool_size``.
    """
    url = make_url(config.url)
    if url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:"):
        return {"pool_size": config.pool_size}
    return {"pool_size": config.pool_size, "max_overflow": 0, "pool_timeout": 30}
