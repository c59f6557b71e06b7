"""
Geometry of checkers moves.

Key idea: generate every diagonal step and jump that stays on the board, without looking at the board.
Legality (direction, occupancy, captures) is checked later by the legality filter.
"""

from dataclasses import dataclass
from typing import Optional, Self

from src.checkers.coordinate import JUMP_DISTANCE, STEP_DISTANCE, Coordinate


@dataclass(frozen=True, order=True)
class Move:
    """basic definition of a move to be made. Ordered by from_square first, then to_square."""

    from_square: Coordinate
    to_square: Coordinate

    @classmethod
    def from_tuples(cls, from_xy: tuple[int, int], to_xy: tuple[int, int]) -> Self:
        """Convenience method: Move.from_tuples((0, 5), (1, 4))"""
        return cls(Coordinate(*from_xy), Coordinate(*to_xy))

    def to_tuples(self) -> tuple[tuple[int, int], tuple[int, int]]:
        return self.from_square.to_tuple(), self.to_square.to_tuple()

    @property
    def y_delta(self) -> int:
        return self.to_square.y - self.from_square.y


def moves_from(square: Coordinate) -> list[Move]:
    """Single steps first, then the jumps"""
    steps = square.geometric_neighbors(STEP_DISTANCE)
    jumps = square.geometric_neighbors(JUMP_DISTANCE)
    return [Move(from_square=square, to_square=target) for target in steps + jumps]


def is_jump(move: Move) -> bool:
    """A jump always covers two rows, regardless of the direction of travel."""
    return abs(move.y_delta) == JUMP_DISTANCE


def jumped_square(move: Move) -> Optional[Coordinate]:
    """The square of the piece that would be captured, None if the move is a single step."""
    if not is_jump(move):
        return None
    return move.from_square.midpoint(move.to_square)
