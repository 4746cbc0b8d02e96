"""User service layer backing the JSON API."""

from dataclasses import replace
from typing import Callable, List

import structlog

from core.exceptions import DuplicateUserError, UserNotFoundError
from domain.collaborators import ICryptographer
from domain.entities.user import Role, User
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.profile_form import email_hash

logger = structlog.get_logger()


class UserService:
    """Service layer for User lookups and creation."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        cryptographer: ICryptographer,
    ) -> None:
        self._uow_factory = uow_factory
        self._cryptographer = cryptographer

    async def find_one(self, login: str) -> User:
        """Get a user by login."""
        async with self._uow_factory() as uow:
            user = await uow.users.find_one(login)
            if not user:
                raise UserNotFoundError(login)
            return user

    async def find_all(self) -> List[User]:
        """Get every user."""
        async with self._uow_factory() as uow:
            return await uow.users.find_all()  # type: ignore[no-any-return]

    async def find_staff(self) -> List[User]:
        """Get the active staff members."""
        async with self._uow_factory() as uow:
            return await uow.users.find_by_roles([Role.STAFF])  # type: ignore[no-any-return]

    async def find_one_staff(self, login: str) -> User:
        """Get a staff member, active or in pause."""
        async with self._uow_factory() as uow:
            user = await uow.users.find_one_by_roles(login, [Role.STAFF, Role.STAFF_IN_PAUSE])
            if not user:
                raise UserNotFoundError(login)
            return user

    async def create(self, user: User) -> User:
        """Create a user. ``user.email`` is given in plaintext."""
        async with self._uow_factory() as uow:
            if await uow.users.find_one(user.login):
                raise DuplicateUserError(user.login)

            to_save = replace(
                user,
                email=self._cryptographer.encrypt(user.email),
                email_hash=None if user.photo_url else email_hash(user.email),
            )
            created = await uow.users.save(to_save)
            await uow.commit()
            logger.info("user_created", login=created.login, role=created.role.value)
            return created
