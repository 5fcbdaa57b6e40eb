"""Unit tests for /fen_printer/chess/pieces.py"""

import pytest

from fen_printer.chess.pieces import FEN_TO_PIECE, Color, Piece
from fen_printer.core.exceptions import InvalidFENError


@pytest.mark.parametrize("char", [char.upper() for char in FEN_TO_PIECE.keys()])
def test_creating_white_piece_from_fen(char: str) -> None:
    """Capital letters are used for white pieces"""
    piece = Piece.from_fen(char)
    assert piece.type == FEN_TO_PIECE[char.lower()]
    assert piece.color == Color.WHITE


@pytest.mark.parametrize("char", [char.lower() for char in FEN_TO_PIECE.keys()])
def test_creating_black_piece_from_fen(char: str) -> None:
    """Lower case letters are used for black pieces"""
    piece = Piece.from_fen(char)
    assert piece.type == FEN_TO_PIECE[char.lower()]
    assert piece.color == Color.BLACK


@pytest.mark.parametrize("char", ["x", "Z", "e", "1", "/"])
def test_unknown_piece_letter(char: str) -> None:
    with pytest.raises(InvalidFENError):
        Piece.from_fen(char)


@pytest.mark.parametrize(
    "char, label",
    [
        ("K", "wK"),
        ("Q", "wQ"),
        ("R", "wR"),
        ("B", "wB"),
        ("N", "wN"),
        ("P", "wP"),
        ("k", "bK"),
        ("q", "bQ"),
        ("r", "bR"),
        ("b", "bB"),
        ("n", "bN"),
        ("p", "bP"),
    ],
)
def test_label(char: str, label: str) -> None:
    """Prefix w for upper case (white), b for lower case (black). The letter itself is always printed in upper case."""
    assert Piece.from_fen(char).label == label
