from dataclasses import dataclass

@dataclass(slots=True)
class PieceSequence:
    """Issues piece ids. Not rolled back by undo, so ids stay unique for the whole session."""
    next_id: int = 1

    def issue(self) -> int:
        issued = self.next_id
        self.next_id += 1
        return issued
