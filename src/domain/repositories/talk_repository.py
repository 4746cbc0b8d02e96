"""Talk repository protocol."""

from typing import Protocol

from domain.entities.talk import Talk


class ITalkRepository(Protocol):
    """Repository interface for Talk entities."""

    async def find_by_speaker_id(self, logins: list[str]) -> list[Talk]:
        """Get talks where any of the logins is a speaker."""
        ...
