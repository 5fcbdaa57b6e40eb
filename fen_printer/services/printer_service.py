"""Orchestration from the command line (request) down to reading the file and rendering the board (and back as a response)."""

from loguru import logger

from fen_printer.api.models import BoardResponse, PrintBoardRequest
from fen_printer.chess.board import Board
from fen_printer.chess.fen import read_placement_field
from fen_printer.chess.renderer import render_board
from fen_printer.core.config import PrinterSettings
from fen_printer.core.exceptions import FileReadError, InvalidFENError


class FENPrinterService:
    """Orchestration of layers for printing a board from a .fen file."""

    def __init__(self, settings: PrinterSettings) -> None:
        self.settings = settings

    def print_board(self, request: PrintBoardRequest) -> BoardResponse:
        """Read the piece placement field from the requested file and render it."""
        field = self._read_field(request.fen_file)

        try:
            board = Board.from_fen(field)
        except InvalidFENError as e:
            logger.warning("Rejected piece placement field of {}: {}", request.fen_file, e)
            raise

        source_name = request.fen_file if self.settings.show_source_name else None
        return BoardResponse(
            source_name=request.fen_file,
            placement_field=field,
            diagram=render_board(board, source_name),
        )

    def _read_field(self, fen_file: str) -> str:
        """Only the first field is read from the file. The file is closed whatever happens."""
        logger.info("Reading {}", fen_file)
        try:
            with open(fen_file, encoding=self.settings.encoding) as stream:
                return read_placement_field(stream)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read {}: {}", fen_file, e)
            raise FileReadError(f"Could not open file: {fen_file}") from e
