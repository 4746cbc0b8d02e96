"""Session identity and locale dependencies for FastAPI."""

from typing import Annotated

from fastapi import Depends, Request

from core.exceptions import AuthenticationError
from domain.entities.user import Language
from domain.services.profile_service import RequestContext

SESSION_EMAIL_KEY = "email"


async def get_session_email(request: Request) -> str:
    """
    Dependency returning the email stored in the session at sign-in.

    Raises:
        AuthenticationError: If the session carries no identity
    """
    email = request.session.get(SESSION_EMAIL_KEY)
    if not email:
        raise AuthenticationError(message="No signed-in user in session")
    return str(email)


def get_language(request: Request) -> Language:
    """Pick the page language from the Accept-Language header."""
    accept_language = request.headers.get("accept-language", "")
    if accept_language.lower().startswith("fr"):
        return Language.FRENCH
    return Language.ENGLISH


async def get_request_context(
    email: Annotated[str, Depends(get_session_email)],
    language: Annotated[Language, Depends(get_language)],
) -> RequestContext:
    return RequestContext(email=email, language=language)


# Type aliases for convenience in route handlers
CurrentContext = Annotated[RequestContext, Depends(get_request_context)]
PageLanguage = Annotated[Language, Depends(get_language)]
