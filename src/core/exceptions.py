"""Exceptions shared across layers. Every error raised on purpose derives from GameError."""


class GameError(Exception):
    """Base class"""


class IllegalMoveError(GameError):
    """The move is not in the list of legal moves of the color to move. The game state is left unchanged."""


class GameStateError(GameError):
    """A (stored) game state that cannot be turned into a Game"""


class InvalidCoordinateError(GameError):
    """Coordinate does not lie on the board"""


class InvalidPieceCodeError(GameError):
    """Integer that does not encode a piece"""


class InvalidBoardError(GameError):
    """Encoded board with the wrong number of squares"""


class RepositoryError(GameError):
    """Persistence layer could not find / store the game"""


class InvalidRequestError(GameError):
    """Request (model) failed validation"""
