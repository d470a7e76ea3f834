"""Configuration for pooled iteration.

Defines the tunable parameters of the pool-backed adapters.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PoolConfig:
    """Configuration parameters for a pool-backed iterator.

    Attributes:
        num_buffers: Number of items that may be checked out at once
        thread_safe: Whether handles may be released from other threads
    """

    num_buffers: int = 4
    thread_safe: bool = False

    def __post_init__(self) -> None:
        if self.num_buffers < 0:
            raise ValueError(f"num_buffers must be >= 0, got {self.num_buffers}")  # noqa: TRY003
