"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator
from pathlib import Path

# Disable rate limiting and point the app at an in-memory database in tests
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from domain.entities.user import Language, Link, Role, User
from infrastructure.crypto.cryptographer import Cryptographer
from infrastructure.database.models import Base, TalkModel, TalkSpeakerModel
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork

# Test database URL (SQLite in memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

SIGNED_IN_EMAIL = "ada@mixitconf.org"


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a test database engine with all tables."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory."""
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def uow_factory(session_factory: async_sessionmaker[AsyncSession]):
    """Unit of Work factory bound to the test database."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(session_factory)

    return factory


@pytest.fixture
def test_cryptographer() -> Cryptographer:
    return Cryptographer()


@pytest.fixture
async def seeded_user(
    uow_factory,
    session_factory: async_sessionmaker[AsyncSession],
    test_cryptographer: Cryptographer,
) -> User:
    """Store a speaker with one talk and return it."""
    user = User(
        login="ada",
        firstname="Ada",
        lastname="Lovelace",
        email=test_cryptographer.encrypt(SIGNED_IN_EMAIL),
        company="Analytical Engines",
        description={Language.FRENCH: "Bonjour **tout le monde**", Language.ENGLISH: "Hello"},
        photo_url="https://mixitconf.org/images/ada.png",
        role=Role.STAFF,
        links=[Link(name="GitHub", url="https://github.com/ada")],
        legacy_id=1234,
    )
    async with uow_factory() as uow:
        await uow.users.save(user)
        await uow.commit()

    async with session_factory() as session:
        talk = TalkModel(
            title="Notes on the Analytical Engine", event="2024", summary="*Poetical* science"
        )
        talk.speakers.append(TalkSpeakerModel(login=user.login))
        session.add(talk)
        await session.commit()
    return user


@pytest.fixture
def app(uow_factory, test_cryptographer: Cryptographer):
    """Create an app whose services use the test database."""
    from api.dependencies.services import (
        get_cryptographer,
        get_profile_service,
        get_user_service,
    )
    from domain.services.profile_service import ProfileService
    from domain.services.user_service import UserService
    from main import create_app

    app = create_app()
    app.dependency_overrides[get_cryptographer] = lambda: test_cryptographer
    app.dependency_overrides[get_profile_service] = lambda: ProfileService(
        uow_factory, test_cryptographer
    )
    app.dependency_overrides[get_user_service] = lambda: UserService(
        uow_factory, test_cryptographer
    )
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """
    Create async test client.

    No session identity is set, so pages under /me and /profile answer 401.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
async def signed_in_client(app, client: AsyncClient) -> AsyncClient:
    """Test client whose session identifies the seeded user."""
    from api.dependencies.session import get_session_email

    app.dependency_overrides[get_session_email] = lambda: SIGNED_IN_EMAIL
    return client
