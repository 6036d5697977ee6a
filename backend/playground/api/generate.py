"""
Generation API endpoint.

Bare generation boundary: prompt plus recent messages in, generated text out.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from playground.api.deps import CurrentUser, GenerationSvc
from playground.core.exceptions import GenerationError
from playground.core.logger import logger
from playground.models.generation import GenerationRequest

router = APIRouter()


@router.post("")
async def generate_component(
    request: GenerationRequest,
    _user: CurrentUser,
    generation_service: GenerationSvc,
):
    """Generate a component; returns {"generatedText"} or {"error"} with 502."""
    try:
        result = await generation_service.generate(request)
    except GenerationError as e:
        logger.warning(f"Error in generate endpoint: {e.message}")
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"error": e.message},
        )
    return {"generatedText": result.generated_text}
