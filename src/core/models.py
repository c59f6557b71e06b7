"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass


@dataclass
class GameModel:
    """Transport-safe representation of a checkers game used between API, Service, DB, and Engine layers.

    board: 64 square codes, index y * 8 + x (-1: empty, bit flags 1: black, 2: white, 4: crowned)
    current_turn: "black" or "white"
    """

    board: list[int]
    current_turn: str
    move_count: int
