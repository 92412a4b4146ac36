"""Human agent - reads moves from terminal."""

from unoengine.engine import DRAW, Choice, Color, PlayerView


class HumanAgent:
    """Agent that prompts the human for input via terminal."""

    def __init__(self, name: str = "human"):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def choose_action(
        self,
        player_view: PlayerView,
        legal_choices: list[Choice],
        seat: int,
    ) -> Choice | None:
        if not legal_choices:
            return None

        print(f"\n--- {self._name}'s turn ---")
        print("Top card:", player_view.top_card)
        if player_view.color_pending:
            print("(color not chosen yet)")
        print("Direction:", "clockwise" if player_view.direction > 0 else "counter-clockwise")
        others = ", ".join(
            f"{name}: {count}" for name, count in player_view.num_cards_per_player.items()
            if name != player_view.player_order[seat]
        )
        print(f"Cards held: {others}")
        if player_view.pending_draw:
            print(f"You must draw {player_view.pending_draw} cards.")
        print("Your hand:")
        for i, card in enumerate(player_view.my_hand):
            mark = "*" if i in legal_choices else " "
            print(f"  {mark}{i}: {card}")

        while True:
            try:
                raw = input("Card number to play, or 'd' to draw: ").strip().lower()
                if raw in ("d", DRAW):
                    return DRAW
                idx = int(raw)
                if idx in legal_choices:
                    return idx
            except ValueError:
                pass
            except EOFError:
                return DRAW
            print("Invalid. Try again.")

    def choose_color(self, player_view: PlayerView, seat: int) -> Color:
        colors = Color.playable()
        options = ", ".join(f"{i}: {c.value}" for i, c in enumerate(colors))
        while True:
            try:
                raw = input(f"Choose a color ({options}): ").strip().lower()
                if raw.isdigit() and int(raw) < len(colors):
                    return colors[int(raw)]
                for color in colors:
                    if raw == color.value:
                        return color
            except EOFError:
                return colors[0]
            print("Invalid. Try again.")
