"""Core blackjack checks - 100% UI-agnostic."""

from core.club import can_enter, check_entry
from core.hand import Hand, HandResult, HandStatus, evaluate

__all__ = [
    "Hand",
    "HandResult",
    "HandStatus",
    "evaluate",
    "can_enter",
    "check_entry",
]
