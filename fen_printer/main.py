"""
Command line entrypoint.

usage: fen-printer fen_file.fen

Every kind of failure gets its own exit code, so scripts calling the printer can tell them apart.
"""

import argparse
import sys
from typing import NoReturn, Optional, Sequence

from loguru import logger
from pydantic import ValidationError

from fen_printer.api.models import PrintBoardRequest
from fen_printer.core.config import LOG_LEVELS, PrinterSettings
from fen_printer.core.exceptions import FileReadError, InvalidFENError, InvalidRequestError
from fen_printer.services.printer_service import FENPrinterService

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_INVALID_EXTENSION = 2
EXIT_UNREADABLE_FILE = 3
EXIT_INVALID_FEN = 4
EXIT_INVALID_SETTINGS = 5

USAGE = "usage: fen-printer fen_file.fen"


class UsageParser(argparse.ArgumentParser):
    """Argument parser that prints the usage line and exits with EXIT_USAGE on bad arguments."""

    def error(self, message: str) -> NoReturn:
        logger.debug("Bad arguments: {}", message)
        print(USAGE)
        sys.exit(EXIT_USAGE)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = UsageParser(
        prog="fen-printer",
        usage="fen-printer fen_file.fen",
        description="Print the chess position stored in a FEN file, white pieces at the bottom.",
    )
    parser.add_argument("fen_file", type=str, help="Path to a .fen file")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Overrides FEN_PRINTER_LOG_LEVEL (default: WARNING)",
    )
    return parser.parse_args(argv)


def setup_logger(level: str) -> None:
    """The board goes to stdout, so keep log records on stderr."""
    logger.remove()
    logger.add(sys.stderr, level=level)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    overrides = {"log_level": args.log_level} if args.log_level is not None else {}
    try:
        settings = PrinterSettings.from_env(**overrides)
    except ValidationError as e:
        problems = "; ".join(f"{error['loc'][0]}: {error['msg']}" for error in e.errors())
        print(f"ERROR: invalid settings: {problems}")
        return EXIT_INVALID_SETTINGS
    setup_logger(settings.log_level)

    try:
        request = PrintBoardRequest(fen_file=args.fen_file)
    except InvalidRequestError as e:
        logger.debug("{}", e)
        print("ERROR: invalid .fen file.")
        return EXIT_INVALID_EXTENSION

    service = FENPrinterService(settings)
    try:
        response = service.print_board(request)
    except FileReadError:
        print("ERROR: could not open file.")
        return EXIT_UNREADABLE_FILE
    except InvalidFENError as e:
        print(f"ERROR: invalid FEN field: {e}")
        return EXIT_INVALID_FEN

    print(response.diagram, end="")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
