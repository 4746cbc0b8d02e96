"""SQLAlchemy implementation of Talk repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.talk import Talk
from domain.entities.user import Language
from infrastructure.database.models import TalkModel, TalkSpeakerModel


class SQLAlchemyTalkRepository:
    """SQLAlchemy implementation of ITalkRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_speaker_id(self, logins: list[str]) -> list[Talk]:
        """Get talks given by any of the logins, most recent event first."""
        if not logins:
            return []

        stmt = (
            select(TalkModel)
            .join(TalkSpeakerModel, TalkModel.id == TalkSpeakerModel.talk_id)
            .where(TalkSpeakerModel.login.in_(logins))
            .order_by(TalkModel.event.desc(), TalkModel.title)
            .distinct()
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    def _to_entity(self, model: TalkModel) -> Talk:
        """Convert ORM model to domain entity."""
        return Talk(
            id=model.id,
            title=model.title,
            summary=model.summary,
            event=model.event,
            language=Language(model.language),
            speaker_ids=[speaker.login for speaker in model.speakers],
        )
