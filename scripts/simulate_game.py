"""Simulate a game with the built-in random AI and print every event."""

import logging

from unoengine.logging_config import setup_logging
from unoengine.orchestration.game_runner import GameRunner


def print_top_card(state):
    if state.top_card is not None:
        print(f"  top: {state.top_card}  next: {state.current_player.name}")


def main():
    setup_logging(logging.INFO)

    runner = GameRunner(4, human_count=1, seed=42, observers=[print_top_card])
    result = runner.run()

    print(f"Game finished! Winner: {result.winner}")
    print(f"Turns: {result.num_turns}")

    # Cards left per player
    for player in runner.controller.state.players:
        print(f"  {player}")


if __name__ == "__main__":
    main()
