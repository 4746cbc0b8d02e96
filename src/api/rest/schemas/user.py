"""Pydantic schemas for User API."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, HttpUrl

from domain.entities.user import MAX_LINKS, Language, Link, Role, User


class LinkSchema(BaseModel):
    """Schema for a profile link."""

    name: str = Field(..., min_length=1, max_length=30)
    url: HttpUrl


class UserCreate(BaseModel):
    """Schema for creating a User. The email is given in plaintext."""

    login: str = Field(..., min_length=1, max_length=100)
    firstname: str = Field(..., min_length=1, max_length=30)
    lastname: str = Field(..., min_length=1, max_length=30)
    email: EmailStr
    company: str | None = Field(None, max_length=60)
    description: dict[Language, str] = Field(default_factory=dict)
    photo_url: HttpUrl | None = None
    role: Role = Role.USER
    links: list[LinkSchema] = Field(default_factory=list, max_length=MAX_LINKS)
    legacy_id: int | None = None

    def to_entity(self) -> User:
        return User(
            login=self.login,
            firstname=self.firstname,
            lastname=self.lastname,
            email=str(self.email),
            company=self.company or None,
            description=dict(self.description),
            photo_url=str(self.photo_url) if self.photo_url else None,
            role=self.role,
            links=[Link(name=link.name, url=str(link.url)) for link in self.links],
            legacy_id=self.legacy_id,
        )


class LinkResponse(BaseModel):
    """Schema for Link response."""

    name: str
    url: str


class UserResponse(BaseModel):
    """Schema for User response. Encrypted email and tokens are never exposed."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "login": "mixit",
                "firstname": "Ada",
                "lastname": "Lovelace",
                "company": "Analytical Engines",
                "description": {"FRENCH": "Bonjour", "ENGLISH": "Hello"},
                "email_hash": "1f3870be274f6c49b3e31a0c6728957f",
                "photo_url": None,
                "role": "USER",
                "links": [{"name": "GitHub", "url": "https://github.com/ada"}],
                "legacy_id": 42,
            }
        },
    )

    login: str
    firstname: str
    lastname: str
    company: str | None = None
    description: dict[Language, str] = Field(default_factory=dict)
    email_hash: str | None = None
    photo_url: str | None = None
    role: Role
    links: list[LinkResponse] = Field(default_factory=list)
    legacy_id: int | None = None

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            login=user.login,
            firstname=user.firstname,
            lastname=user.lastname,
            company=user.company,
            description=user.description,
            email_hash=user.email_hash,
            photo_url=user.photo_url,
            role=user.role,
            links=[LinkResponse(name=link.name, url=link.url) for link in user.links],
            legacy_id=user.legacy_id,
        )
