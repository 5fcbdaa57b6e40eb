"""The Board holds which piece (if any) stands on every square, as read from the piece placement field"""

from dataclasses import dataclass
from typing import Iterator, Optional, Self

from loguru import logger

from fen_printer.chess.fen import Rank, parse_ranks
from fen_printer.chess.pieces import Piece
from fen_printer.chess.square import BOARD_DIMENSIONS, Square


@dataclass
class Board:
    position: dict[Square, Optional[Piece]]

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board using the piece placement field of a FEN string.

        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * black pieces are on the 8th rank, starting with rook on a8, knight on b8, etc.
        * pawns cover 7th rank entirely
        * ranks 6 through 3 have 8 consecutive empty squares
        * rank 2 are the white pawns (capital letters)
        * 1st rank are the white pieces.

        Raises InvalidFENError if the field does not describe exactly 8 ranks of 8 squares.
        """
        position: dict[Square, Optional[Piece]] = {}
        for rank_idx, rank_squares in enumerate(parse_ranks(fen_str)):
            # FEN string is read from top rank (8th) to bottom rank (1st)
            rank = BOARD_DIMENSIONS[1] - rank_idx
            # ... but the first square is on the a-file, so reads in normal direction
            for file, piece in enumerate(rank_squares, start=1):
                position[Square(file, rank)] = piece
        logger.debug("Parsed board with {} pieces", sum(p is not None for p in position.values()))
        return cls(position)

    def piece(self, square: Square) -> Optional[Piece]:
        return self.position[square]

    def ranks(self) -> Iterator[Rank]:
        """The ranks in printing order: 8th rank (black's side) first, a-file to h-file within a rank."""
        num_files, num_ranks = BOARD_DIMENSIONS
        for rank in range(num_ranks, 0, -1):
            yield [self.piece(Square(file, rank)) for file in range(1, num_files + 1)]

