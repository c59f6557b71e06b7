"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ValidationInfo, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color

# Type alias: (x, y), both 0-based. NOTE: off-board values are accepted here, the engine rejects them as illegal moves.
SquareXY = tuple[int, int]
MoveXY = tuple[SquareXY, SquareXY]


# --- REQUEST MODELS ---
class GetGameRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


class LegalMovesRequest(BaseModel):
    game_id: UUID
    color: Optional[Color] = None


class PieceRequest(BaseModel):
    game_id: UUID
    square: SquareXY


class MoveRequest(BaseModel):
    game_id: UUID
    from_square: SquareXY
    to_square: SquareXY

    @field_validator("to_square")
    @classmethod
    def validate_distinct_squares(
        cls, value: SquareXY, info: ValidationInfo
    ) -> SquareXY:
        if info.data.get("from_square") == value:
            raise InvalidRequestError(
                f"Cannot move a piece onto the square it is standing on: {value!r}"
            )
        return value


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    current_turn: Color
    move_count: int
    board: list[int]


class PieceResponse(BaseModel):
    game_id: UUID
    square: SquareXY
    code: int


class LegalMovesResponse(BaseModel):
    game_id: UUID
    color: Color
    legal_moves: list[MoveXY]


class MoveResponse(BaseModel):
    game_id: UUID
    from_square: SquareXY
    to_square: SquareXY
    crowned: bool
    captured: Optional[SquareXY]
    current_turn: Color
    move_count: int
