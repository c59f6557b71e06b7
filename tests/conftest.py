"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable, Generator

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.db.schema import Base

# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)


BoardCodesFn = Callable[[dict[tuple[int, int], int]], list[int]]


@pytest.fixture
def board_codes() -> BoardCodesFn:
    """Call the inner function with a sparse {(x, y): piece code} mapping to get the 64 square codes of a GameModel"""

    def _encode(pieces: dict[tuple[int, int], int]) -> list[int]:
        codes = [-1] * 64
        for (x, y), code in pieces.items():
            codes[y * 8 + x] = code
        return codes

    return _encode


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Connection to a test database. Tables are removed at teardown to make unit tests of repository independent of each other."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        Base.metadata.drop_all(bind=engine)
        db.close()
