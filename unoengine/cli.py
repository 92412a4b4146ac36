"""CLI entry point."""

from __future__ import annotations

from typing import Optional

import typer
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="UNO game with human, random AI and LLM players")


class _HistoryPrinter:
    """Observer that echoes new game events as they are recorded."""

    def __init__(self) -> None:
        self._seen = 0

    def __call__(self, state) -> None:
        for event in state.history[self._seen:]:
            typer.echo(f"> {event}")
        self._seen = len(state.history)


def _settings():
    from unoengine.config import Settings
    from unoengine.logging_config import setup_logging

    settings = Settings.from_env()
    setup_logging(settings.log_level, log_file=settings.log_file, enable_console=False)
    return settings


@app.command()
def play(
    players: int = typer.Option(4, "--players", "-n", help="Number of players (2-10)"),
    humans: int = typer.Option(1, "--humans", "-H", help="Number of human players (seated first)"),
    ai: str = typer.Option("random", "--ai", "-a", help="Engine for AI seats: random or llm"),
    llm_provider: Optional[str] = typer.Option(
        None,
        "--llm-provider",
        "-p",
        help="LLM provider: openrouter, groq, ollama or huggingface",
    ),
    llm_model: Optional[str] = typer.Option(
        None,
        "--llm-model",
        "-m",
        help="Model name (e.g. openai/gpt-4o-mini, meta-llama/llama-3-8b-instruct)",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
    load: Optional[str] = typer.Option(None, "--load", help="Resume turn order from a saved game"),
    save: Optional[str] = typer.Option(None, "--save", help="Save turn order under this name when the game stops"),
) -> None:
    """Play a single UNO game in the terminal."""
    from unoengine.agents.human_agent import HumanAgent
    from unoengine.engine import InvalidConfiguration
    from unoengine.orchestration.game_runner import GameRunner
    from unoengine.persistence import load_game, save_game

    settings = _settings()
    try:
        resume = load_game(load, settings.save_dir) if load else None
    except InvalidConfiguration as e:
        raise typer.BadParameter(str(e), param_hint="--load") from e
    agents = {i: HumanAgent(name=f"Player {i + 1}") for i in range(humans)}
    if ai == "llm":
        from unoengine.agents.llm_agent import LLMAgent

        for seat in range(humans, players):
            agents[seat] = LLMAgent(
                provider=llm_provider or settings.llm_provider,
                model=llm_model or settings.llm_model,
            )
    elif ai != "random":
        raise typer.BadParameter(f"Unknown AI type: {ai}. Use 'random' or 'llm'.")

    runner = GameRunner(
        players,
        human_count=humans,
        agents=agents,
        seed=seed if seed is not None else settings.seed,
        max_turns=settings.max_turns,
        ai_delay=settings.ai_delay,
        observers=[_HistoryPrinter()],
        resume=resume,
    )
    try:
        result = runner.run()
    except InvalidConfiguration as e:
        raise typer.BadParameter(str(e)) from e
    typer.echo(f"Winner: {result.winner or 'None (draw)'}")
    typer.echo(f"Turns: {result.num_turns}")
    if save:
        path = save_game(runner.controller.state, save, settings.save_dir)
        typer.echo(f"Saved to {path}")


@app.command()
def tournament(
    players: int = typer.Option(4, "--players", "-n", help="Number of players (2-10)"),
    games: int = typer.Option(100, "--games", "-g", help="Number of games"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
) -> None:
    """Run many all-AI games and report wins per seat."""
    from unoengine.engine import InvalidConfiguration
    from unoengine.orchestration.tournament import run_tournament

    settings = _settings()
    try:
        wins = run_tournament(
            players,
            num_games=games,
            seed=seed if seed is not None else settings.seed,
            max_turns=settings.max_turns,
        )
    except InvalidConfiguration as e:
        raise typer.BadParameter(str(e)) from e
    typer.echo("Tournament results:")
    for name, w in sorted(wins.items(), key=lambda x: -x[1]):
        typer.echo(f"  {name}: {w} wins")


@app.command()
def saves() -> None:
    """List saved games."""
    from unoengine.persistence import available_saves

    settings = _settings()
    names = available_saves(settings.save_dir)
    if not names:
        typer.echo(f"No saved games in {settings.save_dir}")
        return
    for name in names:
        typer.echo(name)


if __name__ == "__main__":
    app()
