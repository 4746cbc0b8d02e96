"""Presentation DTOs for profile templates and the mappers that build them."""

from dataclasses import dataclass, field
from itertools import groupby

from domain.collaborators import ICryptographer, IMarkdownConverter
from domain.entities.talk import Talk
from domain.entities.user import MAX_LINKS, Language, Link, Role, User

SPEAKER_STARS_IN_HISTORY = frozenset(
    {
        "tastapod",
        "joel.spolsky",
        "pamelafox",
        "MattiSG",
        "bodil",
        "mojavelinux",
        "andrey.breslav",
        "ppezziardi",
        "rising.linda",
    }
)
SPEAKER_STARS_IN_CURRENT_EVENT = frozenset(
    {
        "jhoeller@pivotal.io",
        "sharon@sharonsteed.co",
        "agilex",
        "laura.carvajal@gmail.com",
        "augerment@gmail.com",
        "dgageot",
        "romainguy@curious-creature.com",
        "graphicsgeek1@gmail.com",
        "sam@sambrannen.com",
    }
)

_LOGO_TYPES = {
    ".svg": "image/svg+xml",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".gif": "image/gif",
}
_WEBP_CONVERTIBLE = (".png", ".jpg")


@dataclass(frozen=True)
class LinkDto:
    name: str
    url: str
    index: str


@dataclass(frozen=True)
class SpeakerStarDto:
    login: str
    key: str
    name: str


@dataclass(frozen=True)
class TalkDto:
    id: str
    title: str
    summary: str
    event: str
    language: Language
    speakers: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class UserDto:
    login: str
    firstname: str
    lastname: str
    email: str | None
    company: str | None
    description: str
    email_hash: str | None
    photo_url: str | None
    role: Role
    links: list[Link]
    logo_type: str | None
    logo_webp_url: str | None = None


def logo_type(url: str | None) -> str | None:
    """MIME type of an image URL, from its extension."""
    if url is None:
        return None
    for suffix, mime_type in _LOGO_TYPES.items():
        if url.endswith(suffix):
            return mime_type
    return None


def logo_webp_url(url: str | None) -> str | None:
    """WebP variant of a PNG/JPG URL. Only the trailing extension changes."""
    if url is None or not url.endswith(_WEBP_CONVERTIBLE):
        return None
    return url.rsplit(".", 1)[0] + ".webp"


def to_link_dto(link: Link, index: int) -> LinkDto:
    return LinkDto(name=link.name, url=link.url, index=f"link{index + 1}")


def to_link_dto_slots(links: list[Link]) -> list[Link] | dict[str, list[LinkDto]]:
    """Five form slots keyed ``link1``..``link5``, padded with empty entries.

    A user already holding more than four links gets the raw list back.
    """
    if len(links) > MAX_LINKS - 1:
        return links

    slots = [to_link_dto(link, index) for index, link in enumerate(links)]
    slots.extend(LinkDto("", "", f"link{index + 1}") for index in range(len(links), MAX_LINKS))
    return {index: list(group) for index, group in groupby(slots, key=lambda dto: dto.index)}


def to_speaker_star_dto(user: User) -> SpeakerStarDto:
    return SpeakerStarDto(
        login=user.login,
        key=user.lastname.lower(),
        name=f"{user.firstname} {user.lastname}",
    )


def is_speaker_star(user: User, plain_email: str | None = None) -> bool:
    """Whether the user is on one of the notable speaker lists."""
    stars = SPEAKER_STARS_IN_HISTORY | SPEAKER_STARS_IN_CURRENT_EVENT
    return user.login in stars or (plain_email is not None and plain_email in stars)


def to_profile_dto(
    user: User,
    language: Language,
    cryptographer: ICryptographer,
    markdown_converter: IMarkdownConverter,
) -> UserDto:
    return UserDto(
        login=user.login,
        firstname=user.firstname,
        lastname=user.lastname,
        email=cryptographer.decrypt(user.email),
        company=user.company,
        description=markdown_converter.to_html(user.description.get(language, "")),
        email_hash=user.email_hash,
        photo_url=user.photo_url,
        role=user.role,
        links=user.links,
        logo_type=logo_type(user.photo_url),
        logo_webp_url=logo_webp_url(user.photo_url),
    )


def to_talk_dto(talk: Talk, markdown_converter: IMarkdownConverter) -> TalkDto:
    return TalkDto(
        id=str(talk.id),
        title=talk.title,
        summary=markdown_converter.to_html(talk.summary),
        event=talk.event,
        language=talk.language,
        speakers=list(talk.speaker_ids),
    )
