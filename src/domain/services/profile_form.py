"""Profile form handling: link scraping, candidate construction, validation."""

import hashlib
from collections.abc import Mapping
from dataclasses import replace

from domain.collaborators import ICryptographer
from domain.entities.user import MAX_LINKS, Language, Link, User
from domain.validators import (
    is_valid_email,
    is_valid_markdown,
    is_valid_max_length,
    is_valid_url,
    sanitize,
)

NAME_MAX_LENGTH = 30
COMPANY_MAX_LENGTH = 60
LINK_NAME_MAX_LENGTH = 30

REQUIRED_FIELDS = {
    "firstname": "user.form.error.firstname.required",
    "lastname": "user.form.error.lastname.required",
    "email": "user.form.error.email.required",
    "description-fr": "user.form.error.description.fr.required",
    "description-en": "user.form.error.description.en.required",
}


def email_hash(email: str) -> str:
    """MD5 of the normalized email, used as the default avatar key."""
    return hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


def extract_links(form: Mapping[str, str]) -> list[Link]:
    """Collect the filled ``link{i}Name``/``link{i}Url`` pairs in index order."""
    links = []
    for index in range(MAX_LINKS):
        name = form.get(f"link{index}Name")
        url = form.get(f"link{index}Url")
        if _blank(name) or _blank(url):
            continue
        links.append(Link(name=name, url=url))  # type: ignore[arg-type]
    return links


def build_candidate(
    existing: User, form: Mapping[str, str], cryptographer: ICryptographer
) -> User:
    """Build the edited user, keeping the fields the form cannot change."""
    email = form.get("email") or ""
    photo_url = form.get("photoUrl") or None
    return replace(
        existing,
        firstname=form.get("firstname") or "",
        lastname=form.get("lastname") or "",
        email=cryptographer.encrypt(email),
        company=form.get("company") or None,
        description={
            Language.FRENCH: sanitize(form.get("description-fr")),
            Language.ENGLISH: sanitize(form.get("description-en")),
        },
        email_hash=email_hash(email) if _blank(photo_url) else None,
        photo_url=photo_url,
        links=extract_links(form),
    )


def validate_candidate(
    candidate: User, plain_email: str, errors: dict[str, str]
) -> dict[str, str]:
    """Run every field check on the candidate.

    All checks run so the user sees every problem at once. A format error
    never replaces a "required" error already recorded for the same field.
    """
    if not is_valid_max_length(candidate.firstname, NAME_MAX_LENGTH):
        errors.setdefault("firstname", "user.form.error.firstname.size")
    if not is_valid_max_length(candidate.lastname, NAME_MAX_LENGTH):
        errors.setdefault("lastname", "user.form.error.lastname.size")
    if candidate.company is not None and not is_valid_max_length(
        candidate.company, COMPANY_MAX_LENGTH
    ):
        errors.setdefault("company", "user.form.error.company.size")
    if not is_valid_email(plain_email):
        errors.setdefault("email", "user.form.error.email")
    if not is_valid_markdown(candidate.description.get(Language.FRENCH)):
        errors.setdefault("description-fr", "user.form.error.description.fr")
    if not is_valid_markdown(candidate.description.get(Language.ENGLISH)):
        errors.setdefault("description-en", "user.form.error.description.en")
    if not is_valid_url(candidate.photo_url):
        errors.setdefault("photoUrl", "user.form.error.photourl")

    for position, link in enumerate(candidate.links, start=1):
        if not is_valid_max_length(link.name, LINK_NAME_MAX_LENGTH):
            errors.setdefault(f"link{position}Name", f"user.form.error.link{position}.name")
        if not is_valid_url(link.url):
            errors.setdefault(f"link{position}Url", f"user.form.error.link{position}.url")
    return errors


def apply_profile_edits(
    existing: User, form: Mapping[str, str], cryptographer: ICryptographer
) -> tuple[User, dict[str, str]]:
    """Apply submitted form fields to a user.

    Returns the candidate user and the validation errors. The candidate
    must only be persisted when the error map is empty.
    """
    errors = {field: key for field, key in REQUIRED_FIELDS.items() if _blank(form.get(field))}
    candidate = build_candidate(existing, form, cryptographer)
    validate_candidate(candidate, form.get("email") or "", errors)
    return candidate, errors
