"""Dependency injection factories for services and collaborators."""

from functools import lru_cache
from typing import Callable

from domain.services.profile_service import ProfileService
from domain.services.user_service import UserService
from infrastructure.crypto.cryptographer import Cryptographer
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
from infrastructure.markdown.converter import MarkdownConverter


def get_uow_factory() -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory)

    return factory


@lru_cache
def get_cryptographer() -> Cryptographer:
    """Get the email cryptographer."""
    return Cryptographer()


@lru_cache
def get_markdown_converter() -> MarkdownConverter:
    """Get the markdown converter."""
    return MarkdownConverter()


@lru_cache
def get_profile_service() -> ProfileService:
    """Get Profile service instance."""
    return ProfileService(get_uow_factory(), get_cryptographer())


@lru_cache
def get_user_service() -> UserService:
    """Get User service instance."""
    return UserService(get_uow_factory(), get_cryptographer())
