"""Core types, errors and configuration."""

from .config import PoolConfig
from .errors import (
    CursorError,
    HandleReleasedError,
    InvalidPositionError,
    PoolExhaustedError,
    StaleLoanError,
    UnsortedInputError,
)
from .types import Ordering, Position, SeekBias

__all__ = [
    "PoolConfig",
    "CursorError",
    "HandleReleasedError",
    "InvalidPositionError",
    "PoolExhaustedError",
    "StaleLoanError",
    "UnsortedInputError",
    "Ordering",
    "Position",
    "SeekBias",
]
