"""Resolves one move end to end: validate, commit, score, refill, rotate turn, check for game over."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional

from esper import World

from enclosures.components.cell import Cell
from enclosures.components.game_state import GameMode
from enclosures.components.grid import Grid, Position
from enclosures.components.marketplace import Marketplace
from enclosures.components.move_history import MoveHistory, MoveSnapshot
from enclosures.components.piece import Piece, Shape
from enclosures.components.selection import PieceSelection
from enclosures.events.bus import (
    EVENT_CELL_CLICK,
    EVENT_GAME_OVER,
    EVENT_GROUP_CAPTURED,
    EVENT_GROUPS_CAPTURED,
    EVENT_MARKETPLACE_CHANGED,
    EVENT_PIECE_PLACED,
    EVENT_PLACEMENT_REJECTED,
    EVENT_SCORE_CHANGED,
    EventBus,
)
from enclosures.factories.pieces import replace_marketplace_piece
from enclosures.systems.grouping import GroupKey, GroupStatus, get_all_groups_status
from enclosures.systems.placement_rules import can_any_piece_be_placed, can_place, footprint
from enclosures.systems.scoring import capture_score, newly_captured
from enclosures.systems.selection_system import selected_piece, selected_shape
from enclosures.utils.components import singleton
from enclosures.utils.game_state import get_game_state, set_game_mode
from enclosures.utils.turns import (
    advance_turn,
    get_turn_order,
    ordered_players,
    resolve_winner,
)

logger = logging.getLogger(__name__)

REJECT_NO_SELECTION = "no_selection"
REJECT_GAME_OVER = "game_over"
REJECT_ILLEGAL = "illegal_placement"
REJECT_RESOLVING = "resolving"


@dataclass(slots=True)
class MoveOutcome:
    """Result of a placement attempt.

    captured_groups holds one sorted cell list per group captured on this move.
    winner is the winning seat, set only when the move ended the game.
    """
    accepted: bool
    score_delta: int = 0
    captured_groups: List[List[Position]] = field(default_factory=list)
    game_over: bool = False
    winner: Optional[int] = None
    reason: Optional[str] = None


def take_snapshot(world: World) -> MoveSnapshot:
    return MoveSnapshot(
        cells=singleton(world, Grid).snapshot(),
        players=tuple(replace(player) for player in ordered_players(world)),
        marketplace=tuple(singleton(world, Marketplace).pieces),
        turn_index=get_turn_order(world).index,
        first_piece_placed=get_game_state(world).first_piece_placed,
    )


class PlacementSystem:
    """Turn engine. The only system that writes cells or awards points."""

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_CELL_CLICK, self.on_cell_click)

    def on_cell_click(self, sender, **payload):
        row = payload.get("row")
        col = payload.get("col")
        if row is None or col is None:
            return
        self.attempt_placement(row, col)

    def attempt_placement(self, row: int, col: int) -> MoveOutcome:
        state = get_game_state(self.world)
        if state.game_over:
            return self._reject(row, col, REJECT_GAME_OVER)
        if state.mode == GameMode.RESOLVING:
            return self._reject(row, col, REJECT_RESOLVING)
        piece = selected_piece(self.world)
        shape = selected_shape(self.world)
        if piece is None or shape is None:
            return self._reject(row, col, REJECT_NO_SELECTION)

        grid = singleton(self.world, Grid)
        status_before = get_all_groups_status(grid)
        if not can_place(grid, shape, row, col, first_move=not state.first_piece_placed):
            return self._reject(row, col, REJECT_ILLEGAL)

        # Subscribers only hear about the move once it is fully committed.
        with self.event_bus.held():
            return self._resolve(piece, shape, row, col, grid, status_before)

    def _resolve(
        self, piece: Piece, shape: Shape, row: int, col: int, grid: Grid, status_before: Dict[GroupKey, GroupStatus]
    ) -> MoveOutcome:
        state = get_game_state(self.world)
        singleton(self.world, MoveHistory).push(take_snapshot(self.world))
        set_game_mode(self.world, self.event_bus, GameMode.RESOLVING)

        seat = get_turn_order(self.world).index
        cells = footprint(shape, row, col)
        for r, c in cells:
            grid.put(r, c, Cell(color=piece.color, pattern=piece.pattern, owner=seat))
        state.first_piece_placed = True
        self.event_bus.emit(EVENT_PIECE_PLACED, piece_id=piece.id, seat=seat, cells=cells)

        captured = newly_captured(status_before, get_all_groups_status(grid))
        score = capture_score(captured)
        captured_groups = [list(status.cells) for status in captured]
        if score > 0:
            self._award(seat, score, captured_groups)

        fresh = replace_marketplace_piece(self.world, piece.id)
        self.event_bus.emit(
            EVENT_MARKETPLACE_CHANGED,
            removed_id=piece.id,
            added_id=fresh.id if fresh else None,
        )

        singleton(self.world, PieceSelection).clear()
        advance_turn(self.world, self.event_bus)

        outcome = MoveOutcome(accepted=True, score_delta=score, captured_groups=captured_groups)
        if self._has_legal_move(grid):
            set_game_mode(self.world, self.event_bus, GameMode.AWAITING_SELECTION)
        else:
            outcome.game_over = True
            outcome.winner = self._end_game()
        return outcome

    def _has_legal_move(self, grid: Grid) -> bool:
        market = singleton(self.world, Marketplace)
        first_move = not get_game_state(self.world).first_piece_placed
        return can_any_piece_be_placed(grid, market.pieces, first_move=first_move)

    def _award(self, seat: int, score: int, captured_groups: List[List[Position]]) -> None:
        player = ordered_players(self.world)[seat]
        player.add_score(score)
        logger.info("Seat %d captured %d group(s) for %d points", seat, len(captured_groups), score)
        if len(captured_groups) == 1:
            self.event_bus.emit(
                EVENT_GROUP_CAPTURED,
                seat=seat,
                cells=captured_groups[0],
                size=len(captured_groups[0]),
            )
        else:
            self.event_bus.emit(
                EVENT_GROUPS_CAPTURED,
                seat=seat,
                groups=captured_groups,
                total=score,
            )
        self.event_bus.emit(EVENT_SCORE_CHANGED, seat=seat, delta=score, score=player.score)

    def _end_game(self) -> int | None:
        players = ordered_players(self.world)
        winner = resolve_winner(players)
        state = get_game_state(self.world)
        state.winner = winner
        set_game_mode(self.world, self.event_bus, GameMode.GAME_OVER)
        logger.info("Game over; seat %s wins", winner)
        self.event_bus.emit(
            EVENT_GAME_OVER,
            winner=winner,
            scores=[player.score for player in players],
        )
        return winner

    def _reject(self, row: int, col: int, reason: str) -> MoveOutcome:
        logger.debug("Placement at (%s, %s) rejected: %s", row, col, reason)
        self.event_bus.emit(EVENT_PLACEMENT_REJECTED, row=row, col=col, reason=reason)
        state = get_game_state(self.world)
        return MoveOutcome(accepted=False, game_over=state.game_over, winner=state.winner, reason=reason)
