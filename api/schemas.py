"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field
from typing import Literal


# Hand schemas
class EvaluateRequest(BaseModel):
    """Request to evaluate a two-card hand."""

    first_card: int = Field(..., description="First card value, nominally 2-11")
    second_card: int = Field(..., description="Second card value, nominally 2-11")


class HandResultResponse(BaseModel):
    """Evaluated hand."""

    sum: int
    message: str
    has_blackjack: bool
    is_alive: bool
    status: Literal["CONTINUE", "BLACKJACK", "BUST"]


# Club schemas
class ClubEntryResponse(BaseModel):
    """Club entry decision."""

    age: int
    allowed: bool
    message: str
