"""Shared fixtures for unit tests."""

from typing import Any
from unittest.mock import AsyncMock

import pytest

from domain.entities.user import Language, Link, Role, User
from infrastructure.crypto.cryptographer import Cryptographer

PLAIN_EMAIL = "ada@mixitconf.org"


class FakeUnitOfWork:
    """Fake Unit of Work with repository mocks for unit testing."""

    def __init__(self) -> None:
        self.users = AsyncMock()
        self.talks = AsyncMock()
        self.talks.find_by_speaker_id.return_value = []
        self.committed = False
        self.rolled_back = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def cryptographer() -> Cryptographer:
    return Cryptographer()


@pytest.fixture
def plain_email() -> str:
    return PLAIN_EMAIL


@pytest.fixture
def stored_user(cryptographer: Cryptographer) -> User:
    """A user as loaded from storage, with non-editable fields set."""
    return User(
        login="ada",
        firstname="Ada",
        lastname="Lovelace",
        email=cryptographer.encrypt(PLAIN_EMAIL),
        company="Analytical Engines",
        description={Language.FRENCH: "Bonjour", Language.ENGLISH: "Hello"},
        photo_url="https://mixitconf.org/images/ada.png",
        role=Role.STAFF,
        links=[Link(name="GitHub", url="https://github.com/ada")],
        legacy_id=1234,
        token="secret-token",
    )


@pytest.fixture
def valid_form() -> dict[str, str]:
    """A complete, valid profile form submission."""
    return {
        "firstname": "Augusta",
        "lastname": "King",
        "email": PLAIN_EMAIL,
        "company": "",
        "photoUrl": "",
        "description-fr": "Pionnière de la **programmation**",
        "description-en": "Programming **pioneer**",
        "link0Name": "GitHub",
        "link0Url": "https://github.com/ada",
        "link1Name": "Blog",
        "link1Url": "https://ada.dev",
    }
