"""
The GameEngine is the entrypoint into the domain layer for the service layer.
It owns the board, whose turn it is, the move counter, and the cache of legal moves for both colors.

The cache is kept up to date square by square: whenever the occupant of a square changes,
only the moves of the pieces near that square are regenerated (instead of rescanning the whole board).
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Self

from src.checkers.board import Board
from src.checkers.coordinate import (
    BOARD_DIMENSIONS,
    JUMP_DISTANCE,
    STEP_DISTANCE,
    Coordinate,
)
from src.checkers.legality import legal_moves
from src.checkers.moves import Move, jumped_square, moves_from
from src.checkers.pieces import Color, GamePiece
from src.core.exceptions import GameStateError, IllegalMoveError
from src.core.models import GameModel

logger = logging.getLogger(__name__)

ValidMoves = dict[Color, list[Move]]

# A piece is crowned once it reaches the opponent's back row
CROWN_ROW: dict[Color, int] = {
    Color.BLACK: 0,
    Color.WHITE: BOARD_DIMENSIONS[1] - 1,
}


def should_crown(piece: GamePiece, location: Coordinate) -> bool:
    """NOTE: also True for a piece that is already crowned (crowning again changes nothing)"""
    return location.y == CROWN_ROW[piece.color]


def piece_legal_moves(piece: GamePiece, square: Coordinate, board: Board) -> list[Move]:
    """Generate the geometric candidates from the square, then filter by the rules"""
    return legal_moves(piece, moves_from(square), board)


def compute_valid_moves(board: Board) -> ValidMoves:
    """From-scratch computation of the legal moves of every piece on the board."""
    valid_moves: ValidMoves = {color: [] for color in Color}
    for square, piece in sorted(board.position.items()):
        valid_moves[piece.color].extend(piece_legal_moves(piece, square, board))
    return valid_moves


@dataclass(frozen=True)
class MoveResult:
    """What happened during an accepted move. The host uses this to fire its 'moved' / 'crowned' notifications."""

    movement: Move
    crowned: bool
    captured: Optional[Coordinate] = None


@dataclass
class GameEngine:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board = field(default_factory=Board.empty)
    current_turn: Color = Color.BLACK
    move_count: int = 0
    valid_moves: ValidMoves = field(default_factory=dict)

    @classmethod
    def new(cls) -> Self:
        """A fresh game in the starting position, Black to move."""
        engine = cls()
        engine.initialize()
        return engine

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a GameEngine from the information the Service layer actually has"""

        # Validation
        turn_name = model.current_turn.upper()
        if turn_name not in Color.__members__:
            raise GameStateError(
                f"Invalid turn: {model.current_turn!r}. \nPick one from {','.join([color.name.lower() for color in Color])}"
            )
        if model.move_count < 0:
            raise GameStateError(f"Move count cannot be negative: {model.move_count}")

        board = Board.from_codes(model.board)
        return cls(
            board=board,
            current_turn=Color[turn_name],
            move_count=model.move_count,
            valid_moves=compute_valid_moves(board),
        )

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        return GameModel(
            board=self.board.to_codes(),
            current_turn=self.current_turn.name.lower(),
            move_count=self.move_count,
        )

    def initialize(self) -> None:
        """Sets the pieces on the board, and generates the initial set of legal moves."""
        self.board = Board.starting_position()
        self.current_turn = Color.BLACK
        self.move_count = 0
        self.valid_moves = compute_valid_moves(self.board)

    def piece_at(self, square: Coordinate) -> Optional[GamePiece]:
        return self.board.piece(square)

    def legal_moves(self, color: Optional[Color] = None) -> list[Move]:
        """Sorted copy of the cached legal moves. Defaults to the color to move."""
        color = color or self.current_turn
        return sorted(self.valid_moves.get(color, []))

    def move_piece(self, move: Move) -> MoveResult:
        """
        Attempt to make a move
        -----

        1. check the move is in the cached list of legal moves for the color to move
        2. jump? remove the captured piece
        3. move the piece from its square to the target square
        4. crown the piece when it reaches the opponent's back row
        5. pass the turn to the opponent and update the move counter

        The cache gets updated after every single change to the board.
        """
        valid_move_list = self.valid_moves.get(self.current_turn)
        if valid_move_list is None or move not in valid_move_list:
            raise IllegalMoveError(f"Move not allowed: {move.to_tuples()}")

        # for the type checker: a move from an empty square never ends up in the cache
        piece = self.board.piece(move.from_square)
        assert piece is not None

        captured = jumped_square(move)
        if captured is not None:
            self._remove_piece(captured)

        self._set_piece(piece, move.to_square)
        self._remove_piece(move.from_square)

        crowned = should_crown(piece, move.to_square)
        if crowned:
            self._crown(move.to_square)

        self._advance_turn()
        logger.debug(
            "Move %d: %s %s -> %s (captured=%s, crowned=%s)",
            self.move_count,
            piece.color.name.lower(),
            move.from_square.to_tuple(),
            move.to_square.to_tuple(),
            captured.to_tuple() if captured else None,
            crowned,
        )
        return MoveResult(movement=move, crowned=crowned, captured=captured)

    def place_piece(self, piece: GamePiece, square: Coordinate) -> None:
        """Put a piece on the board outside of the normal flow of the game (setting up a position)"""
        self._set_piece(piece, square)

    def remove_piece(self, square: Coordinate) -> None:
        """Take a piece off the board outside of the normal flow of the game (setting up a position)"""
        self._remove_piece(square)

    # -- PRIVATE HELPERS ---
    def _set_piece(self, piece: GamePiece, square: Coordinate) -> None:
        self.board.place_piece(piece, square)
        self._update_valid_moves(square)

    def _remove_piece(self, square: Coordinate) -> None:
        self.board.remove_piece(square)
        self._update_valid_moves(square)

    def _crown(self, square: Coordinate) -> None:
        """Replace the piece on the square by its crowned version"""
        piece = self.board.piece(square)
        if piece is not None:
            self._set_piece(piece.crown(), square)

    def _advance_turn(self) -> None:
        self.current_turn = self.current_turn.opponent()
        self.move_count += 1

    # -- CACHE HELPERS ---
    def _update_valid_moves(self, changed: Coordinate) -> None:
        """
        A change on one square can only affect the moves of pieces on that square,
        or on squares one step (destination) or two steps (jump landing / jumped piece) away along a diagonal.
        """
        affected = (
            [changed]
            + changed.geometric_neighbors(STEP_DISTANCE)
            + changed.geometric_neighbors(JUMP_DISTANCE)
        )
        for square in affected:
            self._refresh_valid_moves_for(square)
        logger.debug(
            "Refreshed legal moves around %s (%d squares)",
            changed.to_tuple(),
            len(affected),
        )

    def _refresh_valid_moves_for(self, square: Coordinate) -> None:
        """Drop the old moves starting from the square, then add the moves of its current occupant (if any)."""
        for color in Color:
            self._remove_valid_moves_for(square, color)

        piece = self.board.piece(square)
        if piece is None:
            return
        new_moves = piece_legal_moves(piece, square, self.board)
        self.valid_moves.setdefault(piece.color, []).extend(new_moves)

    def _remove_valid_moves_for(self, square: Coordinate, color: Color) -> None:
        color_list = self.valid_moves.get(color)
        if color_list is None:
            return
        self.valid_moves[color] = [
            move for move in color_list if move.from_square != square
        ]
