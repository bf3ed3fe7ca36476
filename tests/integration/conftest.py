"""
Fixtures for integration tests.

Provides:
- In-memory database for testing
- Test client for FastAPI app with repositories bound to the test session
- Caller identity headers and seeded rows
"""

from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from casework.main import app
from casework.core.dependencies import (
    get_homework_repository,
    get_outcome_repository,
    get_participant_repository,
    get_payment_repository,
    get_program_timezone,
    get_shift_repository,
)
from casework.infrastructure.database import (
    Base,
    get_db_session,
    GiftCardPaymentModel,
    ParticipantModel,
    UserModel,
)
from casework.infrastructure.repositories import (
    PostgresHomeworkRepository,
    PostgresOutcomeRepository,
    PostgresParticipantRepository,
    PostgresPaymentRepository,
    PostgresShiftRepository,
)

STAFF_ID = "staff-1"


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def test_engine():
    """Create an in-memory SQLite async engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session with one staff user."""
    async_session = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session() as session:
        session.add(UserModel(id=STAFF_ID, name="Dana Staff", email="dana@example.org"))
        await session.flush()
        yield session


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client(test_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client with repositories bound to the test session.

    The program week is evaluated in UTC so tests don't depend on the
    host timezone.
    """
    async def override_get_participant_repository():
        return PostgresParticipantRepository(test_session)

    async def override_get_payment_repository():
        return PostgresPaymentRepository(test_session)

    async def override_get_shift_repository():
        return PostgresShiftRepository(test_session)

    async def override_get_homework_repository():
        return PostgresHomeworkRepository(test_session)

    async def override_get_outcome_repository():
        return PostgresOutcomeRepository(test_session)

    async def override_get_db_session():
        yield test_session

    def override_get_program_timezone():
        return timezone.utc

    app.dependency_overrides[get_participant_repository] = override_get_participant_repository
    app.dependency_overrides[get_payment_repository] = override_get_payment_repository
    app.dependency_overrides[get_shift_repository] = override_get_shift_repository
    app.dependency_overrides[get_homework_repository] = override_get_homework_repository
    app.dependency_overrides[get_outcome_repository] = override_get_outcome_repository
    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_program_timezone] = override_get_program_timezone

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# =============================================================================
# Helper Fixtures
# =============================================================================

@pytest.fixture
def staff_headers() -> dict:
    """Identity headers as forwarded by the authenticating gateway."""
    return {"X-User-ID": STAFF_ID, "X-User-Role": "STAFF", "X-User-Name": "Dana Staff"}


@pytest_asyncio.fixture
async def participant(test_session: AsyncSession) -> ParticipantModel:
    """An enrolled participant with no history."""
    model = ParticipantModel(
        first_name="Maria",
        last_name="Santos",
        preferred_name="Mari",
        created_by_id=STAFF_ID,
    )
    test_session.add(model)
    await test_session.flush()
    return model


@pytest.fixture
def seed_payments(test_session: AsyncSession):
    """Insert ``count`` past payments, one per week before the current one."""

    async def _seed(participant_id: str, count: int) -> None:
        now = datetime.now(timezone.utc)
        for i in range(count):
            test_session.add(
                GiftCardPaymentModel(
                    participant_id=participant_id,
                    amount=80,
                    issued_at=now - timedelta(weeks=i + 1),
                    issued_by_id=STAFF_ID,
                )
            )
        await test_session.flush()

    return _seed
