"""Hand evaluation endpoints."""

from fastapi import APIRouter, Request

from api.limiter import RATE_LIMIT, limiter
from api.schemas import EvaluateRequest, HandResultResponse
from core.hand import Hand

router = APIRouter()


@router.post("/evaluate", response_model=HandResultResponse)
@limiter.limit(RATE_LIMIT)
async def evaluate_hand(request: Request, hand: EvaluateRequest) -> HandResultResponse:
    """Evaluate two card values against 21."""
    result = Hand(hand.first_card, hand.second_card).evaluate()
    return HandResultResponse(
        sum=result.sum,
        message=result.message,
        has_blackjack=result.has_blackjack,
        is_alive=result.is_alive,
        status=result.status.name,
    )
