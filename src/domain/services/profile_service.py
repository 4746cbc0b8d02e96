"""Profile service: public profile pages and self-service profile edition."""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Callable
from urllib.parse import unquote_plus

import structlog

from core.exceptions import UserNotFoundError
from domain.collaborators import ICryptographer
from domain.entities.talk import Talk
from domain.entities.user import Language, User
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.profile_form import apply_profile_edits

logger = structlog.get_logger()

_LEGACY_ID = re.compile(r"[+-]?[0-9]+")
_LEGACY_ID_RANGE = range(-(2**63), 2**63)


def parse_legacy_id(identifier: str) -> int | None:
    """Signed 64-bit legacy id, or None when the identifier is a login."""
    if not _LEGACY_ID.fullmatch(identifier):
        return None
    value = int(identifier)
    return value if value in _LEGACY_ID_RANGE else None


@dataclass(frozen=True)
class RequestContext:
    """Identity and locale resolved for the current request."""

    email: str
    language: Language = Language.ENGLISH


@dataclass(frozen=True)
class PublicView:
    """Read-only profile page, with talks given by the user."""

    user: User
    talks: list[Talk] = field(default_factory=list)
    can_update_profile: bool = False


@dataclass(frozen=True)
class EditView:
    """Profile edit form, optionally carrying validation errors."""

    user: User
    errors: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ProfileSaved:
    """Outcome of an accepted profile edit."""

    user: User


ViewRequest = PublicView | EditView
SaveOutcome = ProfileSaved | EditView


class ProfileService:
    """Service layer for profile pages."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        cryptographer: ICryptographer,
    ) -> None:
        self._uow_factory = uow_factory
        self._cryptographer = cryptographer

    async def find_one_view(self, identifier: str) -> PublicView:
        """Public profile by legacy numeric id, or by login otherwise."""
        async with self._uow_factory() as uow:
            legacy_id = parse_legacy_id(identifier)
            if legacy_id is None:
                user = await uow.users.find_one(unquote_plus(identifier))
            else:
                user = await uow.users.find_by_legacy_id(legacy_id)

            if not user:
                raise UserNotFoundError(identifier)
            return await self._public_view(uow, user, can_update_profile=False)

    async def find_profile(self, context: RequestContext) -> PublicView:
        """Profile page of the signed-in user, with the edit affordance."""
        async with self._uow_factory() as uow:
            user = await self._current_user(uow, context)
            return await self._public_view(uow, user, can_update_profile=True)

    async def edit_profile(self, context: RequestContext) -> EditView:
        """Edit form of the signed-in user."""
        async with self._uow_factory() as uow:
            user = await self._current_user(uow, context)
            return EditView(user=user)

    async def save_profile(
        self, context: RequestContext, form: Mapping[str, str]
    ) -> SaveOutcome:
        """Validate a submitted profile form and persist it when valid."""
        async with self._uow_factory() as uow:
            existing = await self._current_user(uow, context)
            candidate, errors = apply_profile_edits(existing, form, self._cryptographer)

            if errors:
                logger.info(
                    "profile_rejected",
                    login=existing.login,
                    error_fields=sorted(errors),
                )
                return EditView(user=candidate, errors=errors)

            saved = await uow.users.save(candidate)
            await uow.commit()
            logger.info("profile_saved", login=saved.login)
            return ProfileSaved(user=saved)

    async def _current_user(self, uow: IUnitOfWork, context: RequestContext) -> User:
        user = await uow.users.find_by_email(self._cryptographer.encrypt(context.email))
        if not user:
            raise UserNotFoundError(context.email)
        return user

    async def _public_view(
        self, uow: IUnitOfWork, user: User, can_update_profile: bool
    ) -> PublicView:
        talks = await uow.talks.find_by_speaker_id([user.login])
        return PublicView(user=user, talks=talks, can_update_profile=can_update_profile)
