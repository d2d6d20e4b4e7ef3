from fastapi import APIRouter

from recipe_card.app.api.routes import extract

api_router = APIRouter()
api_router.include_router(extract.router)
