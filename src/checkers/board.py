"""The board only knows which piece stands where. The rules of moving pieces around live in the engine."""

from dataclasses import dataclass, field
from typing import Optional, Self

from src.checkers.coordinate import BOARD_DIMENSIONS, Coordinate
from src.checkers.pieces import EMPTY_CODE, Color, GamePiece
from src.core.exceptions import InvalidBoardError, InvalidCoordinateError

EVEN_COLUMNS = (0, 2, 4, 6)
ODD_COLUMNS = (1, 3, 5, 7)

# Starting rows per color: row -> columns occupied on that row.
# Each color only uses one square color of the board, so the rows alternate between odd and even columns.
STARTING_LAYOUT: dict[Color, dict[int, tuple[int, ...]]] = {
    Color.WHITE: {0: ODD_COLUMNS, 1: EVEN_COLUMNS, 2: ODD_COLUMNS},
    Color.BLACK: {7: EVEN_COLUMNS, 6: ODD_COLUMNS, 5: EVEN_COLUMNS},
}

NUM_SQUARES = BOARD_DIMENSIONS[0] * BOARD_DIMENSIONS[1]


@dataclass
class Board:
    """Only the occupied squares are stored."""

    position: dict[Coordinate, GamePiece] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> Self:
        return cls()

    @classmethod
    def starting_position(cls) -> Self:
        """White on rows 0-2, Black on rows 5-7. 12 pieces each."""
        board = cls()
        for color, rows in STARTING_LAYOUT.items():
            for y, columns in rows.items():
                for x in columns:
                    board.place_piece(GamePiece(color), Coordinate(x, y))
        return board

    @classmethod
    def from_codes(cls, codes: list[int]) -> Self:
        """
        Reverse of `to_codes()`.

        The square (x, y) is found at index y * 8 + x. Empty squares are encoded as -1.
        """
        if len(codes) != NUM_SQUARES:
            raise InvalidBoardError(
                f"A board needs exactly {NUM_SQUARES} square codes, got {len(codes)}."
            )
        board = cls()
        for index, code in enumerate(codes):
            if code == EMPTY_CODE:
                continue
            y, x = divmod(index, BOARD_DIMENSIONS[0])
            board.place_piece(GamePiece.from_code(code), Coordinate(x, y))
        return board

    def to_codes(self) -> list[int]:
        codes: list[int] = []
        for y in range(BOARD_DIMENSIONS[1]):
            for x in range(BOARD_DIMENSIONS[0]):
                piece = self.piece(Coordinate(x, y))
                codes.append(piece.to_code() if piece else EMPTY_CODE)
        return codes

    def piece(self, square: Coordinate) -> Optional[GamePiece]:
        """None for an empty square (squares off the board are always empty)"""
        return self.position.get(square)

    def place_piece(self, piece: GamePiece, square: Coordinate) -> None:
        if not square.is_valid():
            raise InvalidCoordinateError(
                f"Cannot place a piece off the board: {square}"
            )
        self.position[square] = piece

    def remove_piece(self, square: Coordinate) -> Optional[GamePiece]:
        """Returns the piece that was removed (if any)"""
        return self.position.pop(square, None)

    def occupied_squares(self) -> list[Coordinate]:
        return sorted(self.position.keys())

    def locate_color(self, color: Color) -> list[Coordinate]:
        return sorted(
            square for square, piece in self.position.items() if piece.color == color
        )

    def count_pieces(self) -> dict[Color, int]:
        return {color: len(self.locate_color(color)) for color in Color}
