"""
Legality filter
-----

Narrows the geometric candidate moves down to the moves a piece is allowed to make on the current board.
Each rule is an independent predicate, so the order in which they are applied does not matter.
"""

from typing import Optional, Protocol

from src.checkers.coordinate import Coordinate
from src.checkers.moves import Move, is_jump, jumped_square
from src.checkers.pieces import Color, GamePiece


class Board(Protocol):
    """Just the part of the board the legality rules need"""

    def piece(self, square: Coordinate) -> Optional[GamePiece]: ...


def valid_direction(piece: GamePiece, move: Move) -> bool:
    """Black moves down the board (y decreases), White moves up. Crowned pieces go either way."""
    if piece.crowned:
        return True
    if piece.color == Color.BLACK:
        return move.y_delta < 0
    return move.y_delta > 0


def valid_destination(move: Move, board: Board) -> bool:
    """Cannot land on top of another piece"""
    return board.piece(move.to_square) is None


def valid_jump(piece: GamePiece, move: Move, board: Board) -> bool:
    """Single steps always pass. A jump must pass over a piece of the opponent."""
    if not is_jump(move):
        return True

    # for the type checker: is_jump guarantees there is a jumped square
    over = jumped_square(move)
    assert over is not None

    jumped_piece = board.piece(over)
    if jumped_piece is None:
        return False
    return jumped_piece.color != piece.color


def legal_moves(
    piece: GamePiece, candidate_moves: list[Move], board: Board
) -> list[Move]:
    """Keep the candidate moves that survive all three rules"""
    return [
        move
        for move in candidate_moves
        if valid_direction(piece, move)
        and valid_destination(move, board)
        and valid_jump(piece, move, board)
    ]
