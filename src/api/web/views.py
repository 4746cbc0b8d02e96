"""Template rendering for profile views."""

from urllib.parse import quote

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from api.web.dtos import (
    is_speaker_star,
    to_link_dto_slots,
    to_profile_dto,
    to_speaker_star_dto,
    to_talk_dto,
)
from api.web.messages import translate_errors
from core.config import settings
from domain.collaborators import ICryptographer, IMarkdownConverter
from domain.entities.user import Language
from domain.services.profile_service import EditView, PublicView, ViewRequest

templates = Jinja2Templates(directory=settings.templates_dir)


def _base_uri() -> str:
    return quote(settings.base_uri, safe="")


def render_public_view(
    request: Request,
    view: PublicView,
    language: Language,
    cryptographer: ICryptographer,
    markdown_converter: IMarkdownConverter,
) -> HTMLResponse:
    user_dto = to_profile_dto(view.user, language, cryptographer, markdown_converter)
    talks = [to_talk_dto(talk, markdown_converter) for talk in view.talks]
    speaker_star = (
        to_speaker_star_dto(view.user) if is_speaker_star(view.user, user_dto.email) else None
    )
    return templates.TemplateResponse(
        request,
        "user.html",
        {
            "user": user_dto,
            "can_update_profile": view.can_update_profile,
            "talks": talks,
            "has_talks": bool(talks),
            "speaker_star": speaker_star,
            "base_uri": _base_uri(),
        },
    )


def render_edit_view(
    request: Request,
    view: EditView,
    language: Language,
    cryptographer: ICryptographer,
    markdown_converter: IMarkdownConverter,
) -> HTMLResponse:
    user = view.user
    return templates.TemplateResponse(
        request,
        "profile.html",
        {
            "user": to_profile_dto(user, language, cryptographer, markdown_converter),
            "user_mail": cryptographer.decrypt(user.email),
            "description_fr": user.description.get(Language.FRENCH, ""),
            "description_en": user.description.get(Language.ENGLISH, ""),
            "user_links": to_link_dto_slots(user.links),
            "errors": translate_errors(view.errors, language),
            "has_errors": bool(view.errors),
            "base_uri": _base_uri(),
        },
    )


def render_view(
    request: Request,
    view: ViewRequest,
    language: Language,
    cryptographer: ICryptographer,
    markdown_converter: IMarkdownConverter,
) -> HTMLResponse:
    """Dispatch a view variant to its template."""
    if isinstance(view, EditView):
        return render_edit_view(request, view, language, cryptographer, markdown_converter)
    return render_public_view(request, view, language, cryptographer, markdown_converter)
