"""
Chat Routes - Travel assistant endpoint.

The assistant answers with the LLM when one is reachable and with a
prepared keyword-matched reply otherwise, so the widget never errors out
on an outage.
"""
from fastapi import APIRouter, Depends

from src.core.logging_config import get_logger
from src.models.ai import ChatRequest
from src.models.common import ApiResponse, ErrorResponse
from src.services.ai_service import AIService, get_ai_service

logger = get_logger(__name__)

router = APIRouter(
    prefix="/api/chat",
    tags=["Chat"],
    responses={
        400: {"model": ErrorResponse, "description": "Empty or too long query"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)


@router.post(
    "",
    response_model=ApiResponse,
    summary="Ask the travel assistant",
    description="""
    Send a travel question in `query` (at most 1000 characters) with an
    optional `context` string.

    **Examples:**
    - "Plan a 3-day trip to Goa"
    - "Best time to visit Kerala?"
    - "Budget tips for a family vacation"
    """,
)
def send_message(request: ChatRequest, service: AIService = Depends(get_ai_service)) -> ApiResponse:
    logger.info(f"Chat query ({len(request.query)} chars)")
    reply = service.chat(request.query, request.context)
    return ApiResponse(data=reply.model_dump(by_alias=True))
