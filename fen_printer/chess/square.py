"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from dataclasses import dataclass

# Chess board is always 8x8: (number of files, number of ranks)
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True)
class Square:
    """file 1-8 is the a- to h-file, rank 1-8 counts from white's side"""

    file: int
    rank: int
