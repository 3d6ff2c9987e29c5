"""Main entry point for the command-line exercise."""

from config import GameConfig, config
from core.club import check_entry
from core.hand import evaluate


def run(game: GameConfig) -> list[str]:
    """Return the club-entry message and the hand message, in print order."""
    return [
        check_entry(game.age),
        evaluate(game.first_card, game.second_card).message,
    ]


def main() -> None:
    """Print both messages for the fixed exercise values."""
    for line in run(config.game):
        print(line)


if __name__ == "__main__":
    main()
