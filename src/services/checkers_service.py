"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from typing import Optional, Protocol
from uuid import UUID

from src.api.models import (
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveRequest,
    MoveResponse,
    PieceRequest,
    PieceResponse,
)
from src.checkers.coordinate import Coordinate
from src.checkers.engine import GameEngine
from src.checkers.moves import Move
from src.checkers.pieces import EMPTY_CODE
from src.checkers.pieces import Color as PieceColor
from src.core.exceptions import RepositoryError
from src.core.models import GameModel
from src.core.shared_types import Color
from src.db.repository import GameRepository

logger = logging.getLogger(__name__)


class MoveListener(Protocol):
    """Host-side callbacks. Only fired after a move has been accepted and stored."""

    def piece_moved(self, from_square: Coordinate, to_square: Coordinate) -> None: ...
    def piece_crowned(self, square: Coordinate) -> None: ...


class CheckersService:
    """Orchestration of layers for a checkers game."""

    def __init__(
        self, repository: GameRepository, listener: Optional[MoveListener] = None
    ) -> None:
        self.repo = repository
        self.listener = listener

    # -- API routes logic ---
    def create_new_game(self) -> GameResponse:
        """Start a game in the standard starting position and store it."""
        new_game = GameEngine.new()
        stored_game, game_id = self.repo.create_game(new_game.to_model())
        logger.info("Created game %s", game_id)
        return self._create_game_response(game_id, stored_game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by frontend to check when it is the player's turn for instance.
        """
        game_model = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game_model)

    def get_piece(self, request: PieceRequest) -> PieceResponse:
        """Occupancy of a single square, encoded as a piece code (-1 for empty / off the board)."""
        game = GameEngine.from_model(self._fetch_game(request.game_id))
        piece = game.piece_at(Coordinate(*request.square))
        return PieceResponse(
            game_id=request.game_id,
            square=request.square,
            code=piece.to_code() if piece else EMPTY_CODE,
        )

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """retrieve set of legal moves (of the color to move, unless another color is requested)."""
        game = GameEngine.from_model(self._fetch_game(request.game_id))
        color = (
            PieceColor[request.color.name] if request.color else game.current_turn
        )
        return LegalMovesResponse(
            game_id=request.game_id,
            color=Color[color.name],
            legal_moves=[move.to_tuples() for move in game.legal_moves(color)],
        )

    def make_move(self, request: MoveRequest) -> MoveResponse:
        """Make a move attempt. An illegal move raises IllegalMoveError and nothing gets stored."""

        # Retrieve persisted GameModel from repository
        stored_model = self._fetch_game(request.game_id)

        # Create a new GameEngine instance from the retrieved GameModel
        game = GameEngine.from_model(stored_model)

        # Attempt the move
        move = Move.from_tuples(request.from_square, request.to_square)
        result = game.move_piece(move)

        # store in repository
        self.repo.update_game(request.game_id, game.to_model())
        logger.debug("Game %s: stored move %d", request.game_id, game.move_count)

        # notify the host, only now that the move is accepted
        self._notify(result.movement, result.crowned)

        return MoveResponse(
            game_id=request.game_id,
            from_square=move.from_square.to_tuple(),
            to_square=move.to_square.to_tuple(),
            crowned=result.crowned,
            captured=result.captured.to_tuple() if result.captured else None,
            current_turn=Color[game.current_turn.name],
            move_count=game.move_count,
        )

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        self.repo.delete_game(request.game_id)
        logger.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    def _notify(self, move: Move, crowned: bool) -> None:
        if self.listener is None:
            return
        self.listener.piece_moved(move.from_square, move.to_square)
        if crowned:
            self.listener.piece_crowned(move.to_square)

    def _create_game_response(self, game_id: UUID, model: GameModel) -> GameResponse:
        """Convert info in GameModel to a GameResponse (for game with given ID.)"""
        return GameResponse(
            game_id=game_id,
            current_turn=Color(model.current_turn),
            move_count=model.move_count,
            board=model.board,
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
