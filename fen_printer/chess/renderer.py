"""
Printing a board as text, white pieces at the bottom.

-------------------------
|bR|bN|bB|bQ|bK|bB|bN|bR|
|bP|bP|bP|bP|bP|bP|bP|bP|
|  |  |  |  |  |  |  |  |
|  |  |  |  |  |  |  |  |
|  |  |  |  |  |  |  |  |
|  |  |  |  |  |  |  |  |
|wP|wP|wP|wP|wP|wP|wP|wP|
|wR|wN|wB|wQ|wK|wB|wN|wR|
-------------------------
"""

from typing import Optional

from fen_printer.chess.board import Board
from fen_printer.chess.fen import Rank, placement_field
from fen_printer.chess.pieces import Piece
from fen_printer.chess.square import BOARD_DIMENSIONS

CELL_SEPARATOR = "|"
EMPTY_CELL = "  "
# every cell is a pipe + 2 characters, and the rank is closed by one more pipe
FRAME = "-" * (3 * BOARD_DIMENSIONS[0] + 1)


def render_cell(piece: Optional[Piece]) -> str:
    """A cell is opened by a pipe. Its closing pipe is the opening pipe of the next cell (or closes the rank)."""
    return CELL_SEPARATOR + (piece.label if piece is not None else EMPTY_CELL)


def render_rank(rank: Rank) -> str:
    return "".join(render_cell(piece) for piece in rank) + CELL_SEPARATOR


def render_board(board: Board, source_name: Optional[str] = None) -> str:
    """
    Full diagram: a blank line, the name of the source (if any), the top frame, one line per rank and the bottom frame.
    Every line (the last one included) ends with a newline.
    """
    lines = [""]
    if source_name is not None:
        lines.append(source_name)
    lines.append(FRAME)
    lines.extend(render_rank(rank) for rank in board.ranks())
    lines.append(FRAME)
    return "\n".join(lines) + "\n"


def render_fen(fen: str, source_name: Optional[str] = None) -> str:
    """Convenience method: render straight from FEN text. Everything after the piece placement field is ignored."""
    return render_board(Board.from_fen(placement_field(fen)), source_name)
