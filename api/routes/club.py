"""Club entry endpoints."""

from fastapi import APIRouter, Request

from api.limiter import RATE_LIMIT, limiter
from api.schemas import ClubEntryResponse
from core.club import can_enter, check_entry

router = APIRouter()


@router.get("/entry", response_model=ClubEntryResponse)
@limiter.limit(RATE_LIMIT)
async def club_entry(request: Request, age: int) -> ClubEntryResponse:
    """Check whether a guest of the given age may enter."""
    return ClubEntryResponse(age=age, allowed=can_enter(age), message=check_entry(age))
