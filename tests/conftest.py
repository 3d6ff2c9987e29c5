"""Pytest fixtures for blackjack basics tests."""

import pytest

from config import GameConfig
from core.hand import Hand


@pytest.fixture
def exercise_game():
    """The fixed values the command-line exercise runs with."""
    return GameConfig()


@pytest.fixture
def low_hand():
    """A hand well under 21 (10-4)."""
    return Hand(10, 4)


@pytest.fixture
def twenty_hand():
    """A hand one short of blackjack (10-10)."""
    return Hand(10, 10)


@pytest.fixture
def blackjack_hand():
    """A hand totalling exactly 21 (10-11)."""
    return Hand(10, 11)


@pytest.fixture
def bust_hand():
    """A busted hand (10-12)."""
    return Hand(10, 12)
