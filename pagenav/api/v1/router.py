"""API v1 router assembly."""

from fastapi import APIRouter

from pagenav.api.v1.endpoints import pager

api_router = APIRouter()

# Pager endpoints
api_router.include_router(pager.router, tags=["pager"])
