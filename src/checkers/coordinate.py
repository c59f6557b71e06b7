"""
A coordinate on the checkers board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Checkers board is 8x8, indexed 0-7 along both axes
BOARD_DIMENSIONS = (8, 8)

Vector = tuple[int, int]

# NOTE: order matters, neighbors are returned in this order. Backward diagonals are included for both colors.
DIAGONALS: tuple[Vector, ...] = ((-1, 1), (-1, -1), (1, -1), (1, 1))

STEP_DISTANCE = 1
JUMP_DISTANCE = 2


@dataclass(frozen=True, order=True)
class Coordinate:
    x: int
    y: int

    def is_valid(self) -> bool:
        return (0 <= self.x < BOARD_DIMENSIONS[0]) and (
            0 <= self.y < BOARD_DIMENSIONS[1]
        )

    def geometric_neighbors(self, distance: int) -> list[Coordinate]:
        """
        Scale every diagonal by `distance` and keep the ones that land on the board.

        Does not look at the board: direction and occupancy are checked by the legality filter.
        """
        neighbors: list[Coordinate] = []
        for dx, dy in DIAGONALS:
            target = Coordinate(self.x + dx * distance, self.y + dy * distance)
            if target.is_valid():
                neighbors.append(target)
        return neighbors

    def midpoint(self, other: Coordinate) -> Coordinate:
        """The square in between two coordinates (the jumped square for a jump)"""
        return Coordinate((self.x + other.x) // 2, (self.y + other.y) // 2)

    def to_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)
