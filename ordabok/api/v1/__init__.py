"""
API v1 router aggregation.
"""
from fastapi import APIRouter
from ordabok.api.v1.endpoints import languages, users, words

api_router = APIRouter()

# Each router carries its own prefix
for module in (languages, users, words):
    api_router.include_router(module.router)
