from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from recipe_card.app.services import recipe_extractor
from recipe_card.app.services.url_parsing.models import Recipe

router = APIRouter(prefix="/recipes", tags=["recipes"])


class ExtractRequest(BaseModel):
    html: str
    url: str


class ExtractResponse(BaseModel):
    success: bool
    recipe: Optional[Recipe] = None
    parser_strategy: Optional[str] = None
    source_url: Optional[str] = None
    error_code: Optional[str] = None
    message: Optional[str] = None


@router.post("/extract", response_model=ExtractResponse)
def extract_recipe_endpoint(payload: ExtractRequest):
    result = recipe_extractor.parse_recipe_from_html(payload.html, payload.url)

    if not result.success or not result.recipe:
        return ExtractResponse(
            success=False,
            source_url=result.source_url,
            error_code=result.error_code or "parse_failed",
            message=result.error_message or recipe_extractor.NOT_FOUND_MESSAGE,
        )

    return ExtractResponse(
        success=True,
        recipe=result.recipe,
        parser_strategy=result.parser_strategy,
        source_url=result.source_url,
    )
