# vendor_ai/api/v1/routers/suggestions.py
import json
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from vendor_ai.api.deps import suggestion_processor_dep
from vendor_ai.domain.models.product import ErrorResponse, SuggestionsResponse
from vendor_ai.domain.services.constants import ERR_EXPECTED_ARRAY, ERR_PROCESSING
from vendor_ai.domain.services.suggestion_svc import SuggestionProcessingError, SuggestionProcessor

logger = logging.getLogger(__name__)

router = APIRouter(tags=["suggestions"])

ProcessorDep = Annotated[SuggestionProcessor, Depends(suggestion_processor_dep)]


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@router.post(
    "/api/groq",
    response_model=SuggestionsResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="One model suggestion per posted product, in input order",
)
async def suggest_for_products(request: Request, processor: ProcessorDep):
    # Body is read by hand: anything that is not a JSON array is a 400, not FastAPI's 422
    try:
        products = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return _error(status.HTTP_400_BAD_REQUEST, ERR_EXPECTED_ARRAY)

    if not isinstance(products, list):
        return _error(status.HTTP_400_BAD_REQUEST, ERR_EXPECTED_ARRAY)

    logger.info(f"📦 Received {len(products)} products for analysis")

    try:
        results = await processor.process_batch(products)
    except SuggestionProcessingError as e:
        logger.exception(f"❌ Groq API error: {e}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, ERR_PROCESSING)

    return SuggestionsResponse(suggestions=results)
