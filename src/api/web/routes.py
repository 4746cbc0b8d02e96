"""HTML routes for profile pages."""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from api.dependencies.services import (
    get_cryptographer,
    get_markdown_converter,
    get_profile_service,
)
from api.dependencies.session import CurrentContext, PageLanguage
from api.web.views import render_view
from core.config import settings
from core.rate_limit import limiter
from domain.services.profile_service import ProfileSaved, ProfileService
from infrastructure.crypto.cryptographer import Cryptographer
from infrastructure.markdown.converter import MarkdownConverter

router = APIRouter(tags=["profiles"], default_response_class=HTMLResponse)


@router.get("/user/{login}", summary="Public profile")
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def find_one_view(
    request: Request,
    login: str,
    language: PageLanguage,
    service: ProfileService = Depends(get_profile_service),
    cryptographer: Cryptographer = Depends(get_cryptographer),
    markdown_converter: MarkdownConverter = Depends(get_markdown_converter),
) -> HTMLResponse:
    """Public profile by login or legacy numeric id."""
    view = await service.find_one_view(login)
    return render_view(request, view, language, cryptographer, markdown_converter)


@router.get("/me", summary="Own profile")
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def find_profile(
    request: Request,
    context: CurrentContext,
    service: ProfileService = Depends(get_profile_service),
    cryptographer: Cryptographer = Depends(get_cryptographer),
    markdown_converter: MarkdownConverter = Depends(get_markdown_converter),
) -> HTMLResponse:
    view = await service.find_profile(context)
    return render_view(request, view, context.language, cryptographer, markdown_converter)


@router.get("/profile/edit", summary="Profile edit form")
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def edit_profile(
    request: Request,
    context: CurrentContext,
    service: ProfileService = Depends(get_profile_service),
    cryptographer: Cryptographer = Depends(get_cryptographer),
    markdown_converter: MarkdownConverter = Depends(get_markdown_converter),
) -> HTMLResponse:
    view = await service.edit_profile(context)
    return render_view(request, view, context.language, cryptographer, markdown_converter)


@router.post(
    "/profile",
    summary="Save profile",
    response_model=None,
    responses={
        303: {"description": "Profile saved, redirect to /me"},
        200: {"description": "Edit form re-rendered with errors"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def save_profile(
    request: Request,
    context: CurrentContext,
    service: ProfileService = Depends(get_profile_service),
    cryptographer: Cryptographer = Depends(get_cryptographer),
    markdown_converter: MarkdownConverter = Depends(get_markdown_converter),
) -> HTMLResponse | RedirectResponse:
    """Validate and store the submitted profile form."""
    form = await request.form()
    fields = {key: value for key, value in form.items() if isinstance(value, str)}

    outcome = await service.save_profile(context, fields)
    if isinstance(outcome, ProfileSaved):
        return RedirectResponse(f"{settings.base_uri}/me", status_code=status.HTTP_303_SEE_OTHER)
    return render_view(request, outcome, context.language, cryptographer, markdown_converter)
