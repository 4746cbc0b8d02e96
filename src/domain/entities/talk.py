"""Talk domain entity."""

from dataclasses import dataclass, field
from uuid import UUID, uuid4

from domain.entities.user import Language


@dataclass
class Talk:
    """A conference talk, read-only for profile pages."""

    title: str
    event: str
    id: UUID = field(default_factory=uuid4)
    summary: str = ""
    language: Language = Language.FRENCH
    speaker_ids: list[str] = field(default_factory=list)
