from dataclasses import dataclass

@dataclass(slots=True)
class Player:
    """Per-player record. score only grows during play; undo may restore a lower value."""
    name: str
    seat: int
    display_color: str
    score: int = 0

    def add_score(self, amount: int) -> None:
        if amount <= 0:
            return
        self.score += amount
