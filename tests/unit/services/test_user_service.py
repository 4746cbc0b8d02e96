"""Unit tests for UserService."""

import pytest

from core.exceptions import DuplicateUserError, UserNotFoundError
from domain.entities.user import Role, User
from domain.services.profile_form import email_hash
from domain.services.user_service import UserService
from infrastructure.crypto.cryptographer import Cryptographer


@pytest.fixture
def service(uow, cryptographer: Cryptographer) -> UserService:
    return UserService(lambda: uow, cryptographer)


class TestLookups:
    @pytest.mark.asyncio
    async def test_find_one(self, service: UserService, uow, stored_user: User):
        uow.users.find_one.return_value = stored_user

        assert await service.find_one("ada") is stored_user

    @pytest.mark.asyncio
    async def test_find_one_raises_not_found(self, service: UserService, uow):
        uow.users.find_one.return_value = None

        with pytest.raises(UserNotFoundError) as exc_info:
            await service.find_one("ghost")

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_find_staff_only_asks_for_active_staff(self, service: UserService, uow):
        uow.users.find_by_roles.return_value = []

        await service.find_staff()

        uow.users.find_by_roles.assert_called_once_with([Role.STAFF])

    @pytest.mark.asyncio
    async def test_find_one_staff_includes_staff_in_pause(
        self, service: UserService, uow, stored_user: User
    ):
        uow.users.find_one_by_roles.return_value = stored_user

        await service.find_one_staff("ada")

        uow.users.find_one_by_roles.assert_called_once_with(
            "ada", [Role.STAFF, Role.STAFF_IN_PAUSE]
        )

    @pytest.mark.asyncio
    async def test_find_one_staff_raises_for_non_staff(self, service: UserService, uow):
        uow.users.find_one_by_roles.return_value = None

        with pytest.raises(UserNotFoundError):
            await service.find_one_staff("visitor")


class TestCreate:
    @pytest.mark.asyncio
    async def test_encrypts_email_and_sets_avatar_hash(
        self, service: UserService, uow, cryptographer: Cryptographer
    ):
        uow.users.find_one.return_value = None
        uow.users.save.side_effect = lambda user: user
        user = User(login="grace", firstname="Grace", lastname="Hopper", email="grace@navy.mil")

        created = await service.create(user)

        assert cryptographer.decrypt(created.email) == "grace@navy.mil"
        assert created.email_hash == email_hash("grace@navy.mil")
        assert uow.committed

    @pytest.mark.asyncio
    async def test_raises_duplicate(self, service: UserService, uow, stored_user: User):
        uow.users.find_one.return_value = stored_user

        with pytest.raises(DuplicateUserError) as exc_info:
            await service.create(stored_user)

        assert exc_info.value.status_code == 409
        uow.users.save.assert_not_called()
