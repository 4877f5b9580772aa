from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .board import Coord
from .engine import PyramidSolitaire
from .errors import InvalidMoveError

REMOVE = "remove"
PAIR = "pair"
DRAW = "draw"
DISCARD = "discard"
MOVE_KINDS = (REMOVE, PAIR, DRAW, DISCARD)


@dataclass(frozen=True)
class Move:
    """A single player action, expressed in engine coordinates."""
    kind: str
    positions: Tuple[Coord, ...] = ()
    draw_index: Optional[int] = None


def legal_moves(game: PyramidSolitaire) -> List[Move]:
    """Lists every move the engine would accept in the current state."""
    target = game.removal_target
    uncovered = game.uncovered_positions()
    moves: List[Move] = []
    for pos in uncovered:
        if game.get_card_at(*pos).rank == target:
            moves.append(Move(REMOVE, (pos,)))
    for i, first in enumerate(uncovered):
        for second in uncovered[i + 1:]:
            if game.get_card_at(*first).rank + game.get_card_at(*second).rank == target:
                moves.append(Move(PAIR, (first, second)))
    draws = game.get_draw_cards()
    for index, drawn in enumerate(draws):
        if drawn is None:
            continue
        for pos in uncovered:
            if game.get_card_at(*pos).rank + drawn.rank == target:
                moves.append(Move(DRAW, (pos,), index))
    for index, drawn in enumerate(draws):
        if drawn is not None:
            moves.append(Move(DISCARD, (), index))
    return moves


def apply_move(game: PyramidSolitaire, move: Move) -> None:
    """Applies a move to the game in place; engine errors propagate unchanged."""
    if move.kind == REMOVE and len(move.positions) == 1:
        game.remove(*move.positions[0])
    elif move.kind == PAIR and len(move.positions) == 2:
        (r1, c1), (r2, c2) = move.positions
        game.remove_two(r1, c1, r2, c2)
    elif move.kind == DRAW and len(move.positions) == 1 and move.draw_index is not None:
        game.remove_using_draw(move.draw_index, *move.positions[0])
    elif move.kind == DISCARD and move.draw_index is not None:
        game.discard_draw(move.draw_index)
    else:
        raise InvalidMoveError(f"Malformed move: {move}")


def move_to_json(move: Move) -> Dict[str, Any]:
    return {
        "kind": move.kind,
        "positions": [[int(r), int(c)] for (r, c) in move.positions],
        "drawIndex": move.draw_index,
    }


def move_from_json(obj: Dict[str, Any]) -> Move:
    """Builds a Move from its JSON form; raises ValueError on malformed input."""
    kind = str(obj.get("kind", ""))
    if kind not in MOVE_KINDS:
        raise ValueError(f"unknown move kind: {kind!r}")
    positions = tuple((int(r), int(c)) for r, c in obj.get("positions") or [])
    draw_index = obj.get("drawIndex")
    return Move(kind, positions, None if draw_index is None else int(draw_index))
