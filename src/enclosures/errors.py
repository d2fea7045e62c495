"""Exceptions raised by the engine for malformed requests."""


class ConfigurationError(ValueError):
    """Raised when a game is requested with settings the engine cannot honour."""


class CellOutOfRangeError(IndexError):
    def __init__(self, row: int, col: int, size: int):
        super().__init__(f"Cell ({row}, {col}) is outside the {size}x{size} grid")
        self.row = row
        self.col = col
        self.size = size


class UnknownPieceError(KeyError):
    def __init__(self, piece_id: int):
        super().__init__(f"Piece {piece_id!r} is not in the marketplace")
        self.piece_id = piece_id
