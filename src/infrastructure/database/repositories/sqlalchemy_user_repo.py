"""SQLAlchemy implementation of User repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.user import Language, Link, Role, User
from infrastructure.database.models import UserModel


class SQLAlchemyUserRepository:
    """SQLAlchemy implementation of IUserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_one(self, login: str) -> User | None:
        """Get a user by login."""
        model = await self._session.get(UserModel, login)
        return self._to_entity(model) if model else None

    async def find_by_legacy_id(self, legacy_id: int) -> User | None:
        """Get a user by legacy id."""
        stmt = select(UserModel).where(UserModel.legacy_id == legacy_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def find_by_email(self, email: str) -> User | None:
        """Get a user by encrypted email."""
        stmt = select(UserModel).where(UserModel.email == email)
        result = await self._session.execute(stmt)
        model = result.scalars().first()
        return self._to_entity(model) if model else None

    async def find_all(self) -> list[User]:
        """Get all users ordered by login."""
        stmt = select(UserModel).order_by(UserModel.login)
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def find_by_roles(self, roles: list[Role]) -> list[User]:
        """Get users having any of the roles."""
        stmt = (
            select(UserModel)
            .where(UserModel.role.in_([role.value for role in roles]))
            .order_by(UserModel.lastname, UserModel.firstname)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def find_one_by_roles(self, login: str, roles: list[Role]) -> User | None:
        """Get a user by login restricted to the roles."""
        stmt = select(UserModel).where(
            UserModel.login == login,
            UserModel.role.in_([role.value for role in roles]),
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def save(self, user: User) -> User:
        """Insert or replace a user keyed by login."""
        model = await self._session.get(UserModel, user.login)
        if model is None:
            model = UserModel(login=user.login)
            self._session.add(model)

        model.firstname = user.firstname
        model.lastname = user.lastname
        model.email = user.email
        model.company = user.company
        model.description = {language.value: text for language, text in user.description.items()}
        model.email_hash = user.email_hash
        model.photo_url = user.photo_url
        model.role = user.role.value
        model.links = [{"name": link.name, "url": link.url} for link in user.links]
        model.legacy_id = user.legacy_id
        model.token_expiration = user.token_expiration
        model.token = user.token

        await self._session.flush()
        return self._to_entity(model)

    def _to_entity(self, model: UserModel) -> User:
        """Convert ORM model to domain entity."""
        return User(
            login=model.login,
            firstname=model.firstname,
            lastname=model.lastname,
            email=model.email,
            company=model.company,
            description={
                Language(language): text for language, text in (model.description or {}).items()
            },
            email_hash=model.email_hash,
            photo_url=model.photo_url,
            role=Role(model.role),
            links=[Link(name=link["name"], url=link["url"]) for link in model.links or []],
            legacy_id=model.legacy_id,
            token_expiration=model.token_expiration,
            token=model.token,
        )
