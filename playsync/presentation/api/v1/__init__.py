"""API version 1."""

from fastapi import APIRouter

from .tags import router as tags_router

v1_router = APIRouter(prefix="/v1")
v1_router.include_router(tags_router)

__all__ = ["v1_router"]
