"""Hand evaluation for blackjack."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Union

BLACKJACK = 21

DRAW_MESSAGE = "Do you want to draw a new card? 🙂"
BLACKJACK_MESSAGE = "Wohoo! You've got Blackjack! 🥳"
BUST_MESSAGE = "You're out of the game! 😭"


class HandStatus(Enum):
    """Classification of a hand total against 21."""

    CONTINUE = auto()
    BLACKJACK = auto()
    BUST = auto()

    @property
    def message(self) -> str:
        """Return the player-facing message for this status."""
        return STATUS_MESSAGES[self]


STATUS_MESSAGES = {
    HandStatus.CONTINUE: DRAW_MESSAGE,
    HandStatus.BLACKJACK: BLACKJACK_MESSAGE,
    HandStatus.BUST: BUST_MESSAGE,
}


@dataclass(frozen=True)
class HandResult:
    """Outcome of evaluating a two-card hand."""

    sum: int
    message: str
    has_blackjack: bool
    is_alive: bool
    status: HandStatus

    def __iter__(self) -> Iterator[Union[int, str, bool]]:
        """Unpack as (sum, message, has_blackjack, is_alive)."""
        return iter((self.sum, self.message, self.has_blackjack, self.is_alive))


@dataclass(frozen=True)
class Hand:
    """A two-card blackjack hand.

    Card values are meant to lie in [2, 11] but are not checked; any
    integers are summed as given.
    """

    first_card: int
    second_card: int

    @property
    def value(self) -> int:
        """Sum of both cards."""
        return self.first_card + self.second_card

    @property
    def status(self) -> HandStatus:
        """Classify the hand total."""
        total = self.value
        if total < BLACKJACK:
            return HandStatus.CONTINUE
        if total == BLACKJACK:
            return HandStatus.BLACKJACK
        return HandStatus.BUST

    @property
    def is_blackjack(self) -> bool:
        """Check if the hand totals exactly 21."""
        return self.status is HandStatus.BLACKJACK

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (value > 21)."""
        return self.status is HandStatus.BUST

    def evaluate(self) -> HandResult:
        """Evaluate the hand into its total, message and flags."""
        status = self.status
        return HandResult(
            sum=self.value,
            message=status.message,
            has_blackjack=status is HandStatus.BLACKJACK,
            is_alive=status is not HandStatus.BUST,
            status=status,
        )

    def __str__(self) -> str:
        value_str = f"({self.value})"
        if self.is_blackjack:
            value_str = "(BLACKJACK)"
        if self.is_busted:
            value_str = "(BUST)"
        return f"{self.first_card} {self.second_card} {value_str}"


def evaluate(first_card: int, second_card: int) -> HandResult:
    """
    Evaluate two card values.

    Returns:
        HandResult with the sum, the message, and the blackjack/alive flags.
        A sum up to 20 keeps the player in, exactly 21 is blackjack and
        anything above 21 is a bust.
    """
    return Hand(first_card, second_card).evaluate()
