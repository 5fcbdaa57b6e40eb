"""Requests and Response models"""

from pydantic import BaseModel, field_validator

from fen_printer.core.exceptions import InvalidRequestError

FEN_EXTENSION = ".fen"


# --- REQUEST MODELS ---
class PrintBoardRequest(BaseModel):
    fen_file: str

    @field_validator("fen_file")
    @classmethod
    def validate_extension(cls, value: str) -> str:
        # NOTE: exact (case sensitive) match on the suffix. A file called just '.fen' is fine too.
        if not value.endswith(FEN_EXTENSION):
            raise InvalidRequestError(
                f"Cannot interpret {value!r} as a {FEN_EXTENSION} file."
            )
        return value


# --- RESPONSE MODELS ---
class BoardResponse(BaseModel):
    source_name: str
    placement_field: str
    diagram: str
