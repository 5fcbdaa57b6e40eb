"""
Reading the piece placement field of a FEN record.

FEN, or Forsyth-Edwards Notation, describes a chess position in 6 space separated fields:

<piece placement> <active color> <castling rights> <en passant square> <# half move clock> <number turns played>

Only the first field is needed to print a board, so that is the only one read here.
ex) the standard starting position
rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1
* ranks are separated by slashes, from the 8th rank (black's back rank) down to the 1st rank
* within a rank, squares are listed from the a-file to the h-file
* a letter is a piece (upper case: white, lower case: black), a digit is a run of that many empty squares
"""

import io
from dataclasses import dataclass
from typing import Iterator, Optional, TextIO

from loguru import logger

from fen_printer.chess.pieces import FEN_TO_PIECE, Piece
from fen_printer.chess.square import BOARD_DIMENSIONS
from fen_printer.core.exceptions import InvalidFENError

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
RANK_SEPARATOR = "/"
EMPTY_RUN_DIGITS = "12345678"
PIECE_LETTERS = frozenset(FEN_TO_PIECE) | {letter.upper() for letter in FEN_TO_PIECE}

# fields are separated by spaces. A line break also ends the field (a file holding only the placement field)
FIELD_TERMINATORS = (" ", "\n", "\r")

# A rank laid out as parsed: one entry per file, None for an empty square
Rank = list[Optional[Piece]]


# --- FIELD SCANNER ---
def read_placement_field(stream: TextIO) -> str:
    """Consume the stream up to the first field terminator (or the end of the input), and return what was read."""
    characters: list[str] = []
    while (character := stream.read(1)) and character not in FIELD_TERMINATORS:
        characters.append(character)
    field = "".join(characters)
    logger.debug("Scanned piece placement field {!r}", field)
    return field


def placement_field(text: str) -> str:
    """Same as read_placement_field, for text that is already loaded."""
    return read_placement_field(io.StringIO(text))


# --- TOKENS ---
@dataclass(frozen=True)
class OccupiedSquare:
    piece: Piece


@dataclass(frozen=True)
class EmptyRun:
    count: int


@dataclass(frozen=True)
class RankSeparator:
    pass


Token = OccupiedSquare | EmptyRun | RankSeparator


def classify(character: str, position: int) -> Token:
    """
    Decide what a single character of the placement field means.
    Anything that is not a piece letter, a digit 1-8 or a slash is rejected, together with where it was found.
    """
    if character in PIECE_LETTERS:
        return OccupiedSquare(Piece.from_fen(character))
    if character in EMPTY_RUN_DIGITS:
        return EmptyRun(int(character))
    if character == RANK_SEPARATOR:
        return RankSeparator()
    raise InvalidFENError(
        f"Unexpected character {character!r} at position {position} of the piece placement field",
        character=character,
        position=position,
    )


def tokenize(field: str) -> Iterator[Token]:
    for position, character in enumerate(field):
        yield classify(character, position)


# --- STRUCTURE ---
def parse_ranks(field: str) -> list[Rank]:
    """
    Single pass over the placement field, returning the ranks from the 8th down to the 1st.

    Every rank must hold exactly 8 squares and there must be exactly 8 ranks. Both are checked while reading,
    so a rank is only accepted once it is known to be complete.
    """
    num_ranks = BOARD_DIMENSIONS[1]
    if not field:
        raise InvalidFENError("The piece placement field is empty")

    ranks: list[Rank] = []
    current_rank: Rank = []
    for token in tokenize(field):
        if isinstance(token, OccupiedSquare):
            current_rank.append(token.piece)
        elif isinstance(token, EmptyRun):
            current_rank.extend([None] * token.count)
        else:
            ranks.append(_close_rank(current_rank, rank=num_ranks - len(ranks)))
            current_rank = []
            if len(ranks) == num_ranks:
                # a slash after the last rank means yet another rank follows
                raise InvalidFENError(
                    f"The piece placement field describes more than {num_ranks} ranks"
                )

    ranks.append(_close_rank(current_rank, rank=num_ranks - len(ranks)))
    if len(ranks) != num_ranks:
        raise InvalidFENError(
            f"The piece placement field describes {len(ranks)} ranks, expected {num_ranks}"
        )
    return ranks


def _close_rank(squares: Rank, rank: int) -> Rank:
    num_files = BOARD_DIMENSIONS[0]
    if len(squares) != num_files:
        raise InvalidFENError(
            f"Rank {rank} describes {len(squares)} squares, expected {num_files}"
        )
    return squares


def is_valid_position(position: str) -> bool:
    """Only check the part of the FEN encoding for the board position."""
    try:
        parse_ranks(position)
    except InvalidFENError:
        return False
    return True
