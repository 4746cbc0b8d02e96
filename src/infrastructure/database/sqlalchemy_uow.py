"""SQLAlchemy Unit of Work implementation."""

from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from infrastructure.database.repositories.sqlalchemy_talk_repo import SQLAlchemyTalkRepository
from infrastructure.database.repositories.sqlalchemy_user_repo import SQLAlchemyUserRepository


class SQLAlchemyUnitOfWork:
    """Unit of Work owning one session and the repositories bound to it."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None
        self._users: Optional[SQLAlchemyUserRepository] = None
        self._talks: Optional[SQLAlchemyTalkRepository] = None

    @property
    def users(self) -> SQLAlchemyUserRepository:
        if self._users is None:
            raise RuntimeError("UnitOfWork not initialized. Use as context manager.")
        return self._users

    @property
    def talks(self) -> SQLAlchemyTalkRepository:
        if self._talks is None:
            raise RuntimeError("UnitOfWork not initialized. Use as context manager.")
        return self._talks

    async def commit(self) -> None:
        if self._session:
            await self._session.commit()

    async def rollback(self) -> None:
        if self._session:
            await self._session.rollback()

    async def __aenter__(self) -> "SQLAlchemyUnitOfWork":
        self._session = self._session_factory()
        self._users = SQLAlchemyUserRepository(self._session)
        self._talks = SQLAlchemyTalkRepository(self._session)
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[Exception],
        exc_tb: Any,
    ) -> None:
        """Roll back on error, then release the session."""
        if self._session is None:
            return
        if exc_type:
            await self.rollback()
        await self._session.close()
        self._session = None
        self._users = None
        self._talks = None
