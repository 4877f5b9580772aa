from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Tuple

if TYPE_CHECKING:
    from .engine import PyramidSolitaire

Coord = Tuple[int, int]  # (row, col), row 0 is the top of the pyramid

EMPTY = "·"
CELL_WIDTH = 4


def _cell(label: Optional[str]) -> str:
    return (label or EMPTY).center(CELL_WIDTH)


def pretty(game: 'PyramidSolitaire') -> str:
    """Generates a human-readable view of a started game: pyramid, draw pile, stock and score."""
    pyramid = game.get_pyramid()
    height = len(pyramid)
    lines: List[str] = []
    for r, row in enumerate(pyramid):
        indent = " " * ((height - r - 1) * CELL_WIDTH // 2)
        lines.append(f"{r:>2} " + indent + "".join(_cell(str(card) if card else None) for card in row))
    draws = " ".join(f"[{i}]{_cell(str(card) if card else None)}" for i, card in enumerate(game.get_draw_cards()))
    lines.append("")
    lines.append(f"Draw: {draws or '-'}")
    lines.append(f"Stock: {game.stock_size()} | Score: {game.score()}")
    return "\n".join(lines)
