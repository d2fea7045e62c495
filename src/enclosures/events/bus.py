from blinker import Signal
from contextlib import contextmanager
from typing import Dict, List, Optional, Tuple

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}
        self._held: Optional[List[Tuple[str, dict]]] = None

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems nobody else references alive.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, /, **payload):
        if self._held is not None:
            self._held.append((name, payload))
            return
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)

    @contextmanager
    def held(self):
        """Queue every emit made inside the block and deliver them, in order, on exit.

        Nested blocks join the outer one. If the block raises, the queue is dropped.
        """
        if self._held is not None:
            yield
            return
        self._held = []
        try:
            yield
            queued = self._held
        finally:
            self._held = None
        for name, payload in queued:
            self.emit(name, **payload)


# ============================================================================
# INPUT REQUESTS (presentation layer -> engine)
# ============================================================================
EVENT_NEW_GAME_REQUEST = "new_game_request"            # payload: player_count=int, grid_size=int
EVENT_PIECE_SELECT_REQUEST = "piece_select_request"    # payload: piece_id=int
EVENT_ROTATE_REQUEST = "rotate_request"                # payload: None
EVENT_FLIP_REQUEST = "flip_request"                    # payload: None
EVENT_CELL_CLICK = "cell_click"                        # payload: row, col
EVENT_CELL_HOVER = "cell_hover"                        # payload: row, col
EVENT_UNDO_REQUEST = "undo_request"                    # payload: None
EVENT_PLAYER_RENAME_REQUEST = "player_rename_request"  # payload: seat=int, name=str


# ============================================================================
# SELECTION & PLACEMENT
# ============================================================================
EVENT_PIECE_SELECTED = "piece_selected"                # payload: piece_id=int
EVENT_PIECE_TRANSFORMED = "piece_transformed"          # payload: piece_id=int, rotation=int, flipped=bool
EVENT_PLACEMENT_REJECTED = "placement_rejected"        # payload: row, col, reason=str
EVENT_PIECE_PLACED = "piece_placed"                    # payload: piece_id=int, seat=int, cells=list[(r,c)]
EVENT_MARKETPLACE_CHANGED = "marketplace_changed"      # payload: removed_id=int|None, added_id=int|None


# ============================================================================
# GROUPS & SCORING
# ============================================================================
EVENT_GROUP_CAPTURED = "group_captured"                # payload: seat=int, cells=list[(r,c)], size=int
EVENT_GROUPS_CAPTURED = "groups_captured"              # payload: seat=int, groups=list[list[(r,c)]], total=int
EVENT_SCORE_CHANGED = "score_changed"                  # payload: seat=int, delta=int, score=int
EVENT_GROUPS_INSPECTED = "groups_inspected"            # payload: row, col, color_group=GroupView, pattern_group=GroupView


# ============================================================================
# TURNS & GAME FLOW
# ============================================================================
EVENT_GAME_STARTED = "game_started"                    # payload: player_count=int, grid_size=int
EVENT_TURN_ADVANCED = "turn_advanced"                  # payload: previous_seat=int|None, new_seat=int
EVENT_GAME_OVER = "game_over"                          # payload: winner=int, scores=list[int]
EVENT_MOVE_UNDONE = "move_undone"                      # payload: seat=int
EVENT_PLAYER_RENAMED = "player_renamed"                # payload: seat=int, name=str
EVENT_GAME_MODE_CHANGED = "game_mode_changed"          # payload: previous_mode=GameMode|None, new_mode=GameMode
