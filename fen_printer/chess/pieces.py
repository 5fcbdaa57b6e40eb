"""Defines the types of chess pieces, and how they are written in FEN and on the printed board"""

from dataclasses import dataclass
from enum import Enum
from typing import Self

from fen_printer.core.exceptions import InvalidFENError


class PieceType(Enum):
    """Values are the letters printed on the board (pawns get a P)."""

    PAWN = "P"
    KNIGHT = "N"
    BISHOP = "B"
    ROOK = "R"
    QUEEN = "Q"
    KING = "K"


class Color(Enum):
    """Values are the prefixes used when printing a piece: wP, bK, etc."""

    WHITE = "w"
    BLACK = "b"


FEN_TO_PIECE: dict[str, PieceType] = {
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
    "k": PieceType.KING,
}


@dataclass(frozen=True)
class Piece:
    type: PieceType
    color: Color

    @classmethod
    def from_fen(cls, character: str) -> Self:
        # lower case: Black pieces, upper case: White pieces
        if character.lower() not in FEN_TO_PIECE:
            raise InvalidFENError(
                f"{character!r} is not a piece letter. Use one of {''.join(FEN_TO_PIECE)} (or upper case for white)",
                character=character,
            )
        color = Color.WHITE if character.isupper() else Color.BLACK
        piece_type = FEN_TO_PIECE[character.lower()]
        return cls(piece_type, color)

    @property
    def label(self) -> str:
        """How the piece shows up on the printed board: color prefix + upper case letter. ex) wQ, bN"""
        return f"{self.color.value}{self.type.value}"
