"""REST routes served next to the GraphQL endpoints."""
from fastapi import APIRouter

from catalog_service.api import admin

api_router = APIRouter()
api_router.include_router(admin.router)
