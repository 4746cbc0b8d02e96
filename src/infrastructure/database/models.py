"""SQLAlchemy ORM models."""

from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import JSON, BigInteger, DateTime, ForeignKey, String, Text, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

# JSONB on PostgreSQL, plain JSON elsewhere (SQLite in tests)
JsonType = JSON().with_variant(JSONB(), "postgresql")


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class UserModel(Base):
    """Conference user. Emails are stored encrypted."""

    __tablename__ = "users"

    login: Mapped[str] = mapped_column(String(100), primary_key=True)
    firstname: Mapped[str] = mapped_column(String(30), nullable=False)
    lastname: Mapped[str] = mapped_column(String(30), nullable=False)
    email: Mapped[str] = mapped_column(String(500), nullable=False, index=True)
    company: Mapped[str | None] = mapped_column(String(60))
    description: Mapped[dict[str, Any]] = mapped_column(JsonType, default=dict)
    email_hash: Mapped[str | None] = mapped_column(String(32))
    photo_url: Mapped[str | None] = mapped_column(String(500))
    role: Mapped[str] = mapped_column(String(20), nullable=False, default="USER")
    links: Mapped[list[dict[str, Any]]] = mapped_column(JsonType, default=list)
    legacy_id: Mapped[int | None] = mapped_column(BigInteger, unique=True)
    token_expiration: Mapped[datetime | None] = mapped_column(DateTime)
    token: Mapped[str | None] = mapped_column(String(255))


class TalkModel(Base):
    """Talk given at one edition of the conference."""

    __tablename__ = "talks"

    id: Mapped[UUID] = mapped_column(Uuid(), primary_key=True, default=uuid4)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    summary: Mapped[str] = mapped_column(Text, default="")
    event: Mapped[str] = mapped_column(String(10), nullable=False, index=True)
    language: Mapped[str] = mapped_column(String(20), nullable=False, default="FRENCH")

    speakers: Mapped[list["TalkSpeakerModel"]] = relationship(
        "TalkSpeakerModel",
        back_populates="talk",
        cascade="all, delete-orphan",
        lazy="selectin",
    )


class TalkSpeakerModel(Base):
    """Association between a talk and the login of one of its speakers."""

    __tablename__ = "talk_speakers"

    talk_id: Mapped[UUID] = mapped_column(
        Uuid(),
        ForeignKey("talks.id", ondelete="CASCADE"),
        primary_key=True,
    )
    login: Mapped[str] = mapped_column(String(100), primary_key=True, index=True)

    talk: Mapped["TalkModel"] = relationship("TalkModel", back_populates="speakers")
