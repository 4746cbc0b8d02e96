"""User repository protocol."""

from typing import Protocol

from domain.entities.user import Role, User


class IUserRepository(Protocol):
    """Repository interface for User entities."""

    async def find_one(self, login: str) -> User | None:
        """Get a user by login."""
        ...

    async def find_by_legacy_id(self, legacy_id: int) -> User | None:
        """Get a user by the numeric id of the previous system."""
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Get a user by encrypted email."""
        ...

    async def find_all(self) -> list[User]:
        """Get all users."""
        ...

    async def find_by_roles(self, roles: list[Role]) -> list[User]:
        """Get all users having one of the roles."""
        ...

    async def find_one_by_roles(self, login: str, roles: list[Role]) -> User | None:
        """Get a user by login if they have one of the roles."""
        ...

    async def save(self, user: User) -> User:
        """Insert or replace a user, keyed by login."""
        ...
