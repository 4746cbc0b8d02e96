"""JSON API router configuration."""

from fastapi import APIRouter

from api.rest.routes.users import staff_router, users_router

router = APIRouter()
router.include_router(users_router)
router.include_router(staff_router)
