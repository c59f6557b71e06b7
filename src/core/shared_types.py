"""
Type definitions used across layers
"""

from enum import StrEnum

# --- The domain layer has its own Color enum (src/checkers/pieces.py). This one is used at the boundaries (API models, persisted data).
# --- NOTE Same name on purpose: the imports show which version is used in what part of the code


class Color(StrEnum):
    BLACK = "black"
    WHITE = "white"
