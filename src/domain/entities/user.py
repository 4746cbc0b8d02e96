"""User domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum


class Language(StrEnum):
    """Languages a profile description can be written in."""

    FRENCH = "FRENCH"
    ENGLISH = "ENGLISH"


class Role(StrEnum):
    """Conference roles. Not editable from the profile form."""

    STAFF = "STAFF"
    STAFF_IN_PAUSE = "STAFF_IN_PAUSE"
    USER = "USER"
    VOLUNTEER = "VOLUNTEER"


MAX_LINKS = 5


@dataclass(frozen=True, slots=True)
class Link:
    """A named link shown on a profile. Position matters."""

    name: str
    url: str


@dataclass
class User:
    """Domain entity for a conference user.

    ``email`` holds the encrypted address. ``email_hash`` is the avatar
    fallback key, only set when no ``photo_url`` is given.
    """

    login: str
    firstname: str
    lastname: str
    email: str
    company: str | None = None
    description: dict[Language, str] = field(default_factory=dict)
    email_hash: str | None = None
    photo_url: str | None = None
    role: Role = Role.USER
    links: list[Link] = field(default_factory=list)
    legacy_id: int | None = None
    token_expiration: datetime | None = None
    token: str | None = None
