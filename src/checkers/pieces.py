"""Defines the checkers pieces"""

from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Self

from src.core.exceptions import InvalidPieceCodeError


class Color(Enum):
    BLACK = auto()
    WHITE = auto()

    def opponent(self) -> "Color":
        return Color.WHITE if self == Color.BLACK else Color.BLACK


# Bit flags used to encode a square as a single integer (for persistence and the host shell)
BLACK_FLAG = 1
WHITE_FLAG = 2
CROWN_FLAG = 4
EMPTY_CODE = -1

COLOR_TO_FLAG: dict[Color, int] = {
    Color.BLACK: BLACK_FLAG,
    Color.WHITE: WHITE_FLAG,
}

FLAG_TO_COLOR: dict[int, Color] = {value: key for key, value in COLOR_TO_FLAG.items()}


@dataclass(frozen=True)
class GamePiece:
    color: Color
    crowned: bool = False

    def crown(self) -> Self:
        """Promotion never changes the color. Crowning a crowned piece changes nothing."""
        return replace(self, crowned=True)

    @classmethod
    def from_code(cls, code: int) -> Self:
        """ex) 1: black piece, 6: crowned white piece"""
        if code < 0 or code & ~(BLACK_FLAG | WHITE_FLAG | CROWN_FLAG):
            raise InvalidPieceCodeError(f"Unknown piece code: {code}")
        color_flag = code & ~CROWN_FLAG
        if color_flag not in FLAG_TO_COLOR:
            raise InvalidPieceCodeError(
                f"Piece code {code} must contain exactly one color flag."
            )
        return cls(FLAG_TO_COLOR[color_flag], crowned=bool(code & CROWN_FLAG))

    def to_code(self) -> int:
        code = COLOR_TO_FLAG[self.color]
        if self.crowned:
            code += CROWN_FLAG
        return code
