"""Tournament - run many games and aggregate results."""

import random
from collections import defaultdict
from typing import Optional

from unoengine.orchestration.game_runner import GameRunner


def run_tournament(
    player_count: int,
    num_games: int = 100,
    seed: Optional[int] = None,
    agents: Optional[dict] = None,
    max_turns: int = 1000,
) -> dict[str, int]:
    """Play ``num_games`` games and count wins per seat.

    Seats without an agent are played by the built-in random AI. Games that
    hit ``max_turns`` without a winner are not counted.

    Returns:
        Dict mapping player name to number of wins.
    """
    wins: dict[str, int] = defaultdict(int)

    rng = random.Random(seed)
    for _ in range(num_games):
        runner = GameRunner(
            player_count,
            human_count=1,
            agents=agents,
            seed=rng.randint(0, 2**31 - 1),
            max_turns=max_turns,
        )
        result = runner.run()
        if result.winner:
            wins[result.winner] += 1

    return dict(wins)
