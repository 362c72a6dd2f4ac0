"""Pytest configuration and fixtures."""
import pytest
import pytest_asyncio
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from bounty_tx.config import Settings
from bounty_tx.database import Base
from bounty_tx.services.tx_store import TrackedTxStore


# Use in-memory SQLite for tests
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

MONITORING_ADDRESS = "addr_test1wzgithoneyscript0000000000000000000000000000000"
TX_HASH = "5f1c" + "ab" * 30


@pytest_asyncio.fixture(scope="function")
async def db_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def session_maker(db_engine) -> AsyncGenerator[async_sessionmaker, None]:
    """Session factory bound to the test engine."""
    yield async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False
    )


@pytest_asyncio.fixture(scope="function")
async def store(session_maker) -> TrackedTxStore:
    """Tracked-transaction store over the test database."""
    return TrackedTxStore(session_maker)


@pytest.fixture
def settings() -> Settings:
    """Settings with every static bounty field populated."""
    return Settings(
        _env_file=None,
        database_url=TEST_DATABASE_URL,
        create_bounty_tir="aa01",
        add_funds_tir="aa02",
        deploy_settings_tir="aa03",
        githoney_addr="addr_test1githoney",
        githoney_script_address="addr_test1wzscript",
        githoney_script_bytes="5901ab",
        githoney_payment_cred="11" * 28,
        githoney_staking_cred="22" * 28,
        admin_payment_cred="33" * 28,
        validator_ref="44" * 32 + "#0",
        minting_policy_id="55" * 28,
        monitoring_address=MONITORING_ADDRESS,
    )
