"""
Exceptions raised across layers.

The domain layer only raises; deciding what to tell the user (and with which exit code) is left to the outermost layer.
"""

from typing import Optional


class FENPrinterError(Exception):
    """Base class: catch this to handle every failure this package reports on purpose."""


class InvalidRequestError(FENPrinterError):
    """The program was invoked with something it cannot work with (e.g. a file that is not a .fen file)."""


class FileReadError(FENPrinterError):
    """The .fen file exists in name only: it could not be opened, read or decoded."""


class InvalidFENError(FENPrinterError, ValueError):
    """
    The piece placement field cannot be interpreted.
    ----
    When a single character is to blame, `character` and `position` (0-based index into the field) point at it.
    For structural problems (wrong number of squares in a rank, wrong number of ranks) both are None.
    """

    def __init__(
        self,
        message: str,
        character: Optional[str] = None,
        position: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.character = character
        self.position = position
