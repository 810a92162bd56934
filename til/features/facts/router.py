"""Facts API routes - main routers that include the route modules."""

from fastapi import APIRouter

from til.features.facts.routes.facts import router as facts_api_router
from til.features.facts.routes.pages import router as pages_router

api_router = APIRouter(tags=["facts"])
api_router.include_router(facts_api_router)

page_router = APIRouter(tags=["pages"], include_in_schema=False)
page_router.include_router(pages_router)
