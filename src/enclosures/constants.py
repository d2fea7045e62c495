DEFAULT_GRID_SIZE = 12
GRID_SIZE_CHOICES = (10, 12, 14)
DEFAULT_PLAYER_COUNT = 2
MARKETPLACE_SIZE = 7

# Colour id -> display hex. Order matters: player display colours cycle through it by seat.
COLORS = {
    'blue':   '#4A90E2',
    'red':    '#E74C3C',
    'yellow': '#F2E642',
}
PATTERNS = ('dots', 'boxes', 'diagonals')

# Fill ratio thresholds that bias the size of freshly generated pieces.
# At or above FILL_TINY_PIECES only pieces with <= TINY_PIECE_MAX_CELLS cells are offered,
# at or above FILL_NO_LARGE_PIECES pieces with >= LARGE_PIECE_MIN_CELLS cells are held back,
# below that pieces with <= SMALL_PIECE_MAX_CELLS cells are held back.
FILL_TINY_PIECES = 0.85
FILL_NO_LARGE_PIECES = 0.60
TINY_PIECE_MAX_CELLS = 3
LARGE_PIECE_MIN_CELLS = 5
SMALL_PIECE_MAX_CELLS = 2
